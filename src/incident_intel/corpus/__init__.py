"""
Corpus sources for fitting the featurizer and classifier.

- builtin: hand-curated descriptions and labeled samples (always available)
- loader: best-effort loading of file-sourced corpora
"""

from incident_intel.corpus.builtin import (
    PLACEHOLDER_DOCUMENT,
    WASTE_LABELS,
    builtin_descriptions,
    builtin_training_samples,
)
from incident_intel.corpus.loader import load_bootstrap_corpus, load_training_corpus

__all__ = [
    "PLACEHOLDER_DOCUMENT",
    "WASTE_LABELS",
    "builtin_descriptions",
    "builtin_training_samples",
    "load_bootstrap_corpus",
    "load_training_corpus",
]
