"""
Best-effort loaders for external corpus sources.

Both loaders return an empty list (and log a warning) when the source is
missing, unreadable or malformed, so callers can fall back to the built-in
corpora without handling errors themselves.
"""

import csv
import json
import logging
from pathlib import Path
from typing import List, Optional

from incident_intel.models import TrainingSample

logger = logging.getLogger(__name__)


def load_bootstrap_corpus(path: Optional[str | Path]) -> List[str]:
    """
    Load example incident descriptions for fitting the featurizer.

    Supported formats:
    - ``.json``: a list of strings
    - anything else: plain text, one description per line

    Args:
        path: Location of the corpus file (None disables loading)

    Returns:
        Non-blank descriptions, in file order
    """
    if not path:
        return []

    corpus_path = Path(path)
    try:
        if corpus_path.suffix.lower() == ".json":
            with open(corpus_path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError("expected a JSON list of strings")
            documents = [str(item) for item in data if isinstance(item, str)]
        else:
            with open(corpus_path, encoding="utf-8") as f:
                documents = f.read().splitlines()
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValueError) as e:
        logger.warning(f"Could not load bootstrap corpus from {corpus_path}: {e}")
        return []

    documents = [doc.strip() for doc in documents if doc and doc.strip()]
    logger.info(f"Loaded {len(documents)} bootstrap descriptions from {corpus_path}")
    return documents


def load_training_corpus(path: Optional[str | Path]) -> List[TrainingSample]:
    """
    Load labeled samples for fitting the classifier.

    Supported formats:
    - ``.json``: a list of ``{"text": ..., "label": ...}`` objects
    - ``.csv``: a header row with ``text`` and ``label`` columns

    Rows with an empty text or label are skipped. Any structural problem
    discards the whole file.

    Args:
        path: Location of the corpus file (None disables loading)

    Returns:
        Validated training samples, in file order
    """
    if not path:
        return []

    corpus_path = Path(path)
    try:
        if corpus_path.suffix.lower() == ".csv":
            with open(corpus_path, encoding="utf-8", newline="") as f:
                rows = list(csv.DictReader(f))
        else:
            with open(corpus_path, encoding="utf-8") as f:
                rows = json.load(f)
            if not isinstance(rows, list):
                raise ValueError("expected a JSON list of samples")

        samples = [TrainingSample(**row) for row in rows]
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, csv.Error, ValueError, TypeError) as e:
        # ValidationError is a ValueError subclass
        logger.warning(f"Could not load training corpus from {corpus_path}: {e}")
        return []

    samples = [s for s in samples if s.text.strip() and s.label.strip()]
    logger.info(
        f"Loaded {len(samples)} training samples from {corpus_path} "
        f"({len({s.label for s in samples})} labels)"
    )
    return samples
