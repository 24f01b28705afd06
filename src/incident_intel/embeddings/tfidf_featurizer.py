"""TF-IDF bag-of-words featurizer for incident descriptions."""

import logging
import threading
from typing import List, Optional, Sequence

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion

from incident_intel.config import IncidentIntelSettings
from incident_intel.corpus import (
    PLACEHOLDER_DOCUMENT,
    builtin_descriptions,
    load_bootstrap_corpus,
)

logger = logging.getLogger(__name__)


def build_text_features() -> FeatureUnion:
    """
    Build the (unfitted) text feature extractor.

    Word unigrams/bigrams capture vocabulary overlap, character n-grams
    within word boundaries make the features tolerant to inflections and
    compounds ("river" vs "riverbank"). Each block is L2-normalised.
    """
    return FeatureUnion(
        [
            (
                "words",
                TfidfVectorizer(lowercase=True, ngram_range=(1, 2), sublinear_tf=True),
            ),
            (
                "chars",
                TfidfVectorizer(
                    lowercase=True, analyzer="char_wb", ngram_range=(3, 5), sublinear_tf=True
                ),
            ),
        ]
    )


class TfidfFeaturizer:
    """
    Featurizer producing TF-IDF vectors over a vocabulary learned once.

    Use `TfidfFeaturizer.fit(corpus)` (or `from_settings`) to construct a
    fitted instance. The fitted extractor is never modified afterwards;
    `transform` calls are serialized by an instance lock.
    """

    def __init__(self, features: FeatureUnion, corpus_size: int):
        self._features = features
        self._lock = threading.Lock()
        self._corpus_size = corpus_size
        self._dimension = len(features.get_feature_names_out())

        logger.info(
            f"TfidfFeaturizer ready: {self._dimension} dimensions "
            f"from {corpus_size} documents"
        )

    @classmethod
    def fit(cls, corpus: Optional[Sequence[str]]) -> "TfidfFeaturizer":
        """
        Fit a featurizer against a bootstrap corpus.

        An empty corpus (or one that yields no vocabulary) is replaced by a
        single placeholder document, so fitting never fails.

        Args:
            corpus: Example incident descriptions

        Returns:
            Fitted featurizer
        """
        documents = [doc for doc in (corpus or []) if doc and doc.strip()]
        if not documents:
            logger.warning("Empty bootstrap corpus, fitting featurizer on placeholder text")
            documents = [PLACEHOLDER_DOCUMENT]

        features = build_text_features()
        try:
            features.fit(documents)
        except ValueError as e:
            logger.warning(f"Featurizer fit failed ({e}), fitting on placeholder text")
            documents = [PLACEHOLDER_DOCUMENT]
            features = build_text_features()
            features.fit(documents)

        return cls(features, corpus_size=len(documents))

    @classmethod
    def from_settings(cls, settings: Optional[IncidentIntelSettings] = None) -> "TfidfFeaturizer":
        """Fit against the configured bootstrap corpus, or the built-in descriptions."""
        settings = settings or IncidentIntelSettings()
        corpus = load_bootstrap_corpus(settings.bootstrap_corpus_path)
        if not corpus:
            corpus = builtin_descriptions()
        return cls.fit(corpus)

    @property
    def dimension(self) -> int:
        """Vector dimension (vocabulary size) of this fitted instance."""
        return self._dimension

    @property
    def model_name(self) -> str:
        return "tfidf-words-chars"

    def transform(self, text: Optional[str]) -> List[float]:
        """
        Featurize a description.

        Args:
            text: Description text (None is treated as empty)

        Returns:
            Non-negative vector of `dimension` length (all zeros for empty text)
        """
        with self._lock:
            matrix = self._features.transform([text or ""])

        vector = matrix.toarray()[0].tolist()
        logger.debug(f"Featurized {len(text or '')} chars -> {matrix.nnz} non-zero features")
        return vector
