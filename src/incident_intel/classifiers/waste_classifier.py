"""
Multiclass waste-type classifier.

Pipeline: TF-IDF text features (shared with the featurizer) followed by a
multinomial logistic regression. Raw per-label decision scores are turned
into a probability distribution with a numerically stable softmax.
"""

import logging
import threading
from typing import List, Optional, Sequence

import numpy as np
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from incident_intel.config import IncidentIntelSettings
from incident_intel.corpus import builtin_training_samples, load_training_corpus
from incident_intel.embeddings.tfidf_featurizer import build_text_features
from incident_intel.models import ClassificationResult, ClassificationScore, TrainingSample

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "unknown"

# Configuration constants
CLASSIFIER_C = 10.0
CLASSIFIER_MAX_ITER = 1000
CLASSIFIER_RANDOM_STATE = 17


def softmax(values: Sequence[float]) -> List[float]:
    """
    Numerically stable softmax.

    Non-finite scores carry no probability mass. If no score is finite, or
    the exponentials sum to zero, every probability is 0.0.

    Args:
        values: Raw per-label scores

    Returns:
        Probabilities in the same order as `values`
    """
    if len(values) == 0:
        return []

    scores = np.asarray(values, dtype=float)
    finite = np.isfinite(scores)
    if not finite.any():
        return [0.0] * len(scores)

    shifted = np.where(finite, scores - scores[finite].max(), -np.inf)
    exp_scores = np.exp(shifted)
    total = exp_scores.sum()
    if total == 0 or not np.isfinite(total):
        return [0.0] * len(scores)

    return (exp_scores / total).tolist()


def _build_pipeline() -> Pipeline:
    return Pipeline(
        [
            ("features", build_text_features()),
            (
                "clf",
                LogisticRegression(
                    C=CLASSIFIER_C,
                    max_iter=CLASSIFIER_MAX_ITER,
                    random_state=CLASSIFIER_RANDOM_STATE,
                ),
            ),
        ]
    )


class WasteClassifier:
    """
    Trained text classifier mapping descriptions to waste-type labels.

    Construct with `WasteClassifier.fit(samples)` or `from_settings`. Fitting
    never fails: empty or unusable training data falls back to the built-in
    labeled corpus. `predict` calls are serialized by an instance lock.
    """

    def __init__(self, pipeline: Pipeline, sample_count: int):
        self._pipeline = pipeline
        self._lock = threading.Lock()
        self._labels: List[str] = [str(label) for label in pipeline.classes_]
        self.sample_count = sample_count

        logger.info(
            f"WasteClassifier trained on {sample_count} samples: labels={self._labels}"
        )

    @classmethod
    def fit(cls, samples: Optional[Sequence[TrainingSample]]) -> "WasteClassifier":
        """
        Train a classifier on labeled samples.

        Args:
            samples: Labeled descriptions (empty or None uses the built-in corpus)

        Returns:
            Fitted classifier
        """
        samples = list(samples or [])
        if not samples:
            logger.warning("No training samples provided, using built-in corpus")
            samples = builtin_training_samples()

        try:
            pipeline = cls._train(samples)
        except ValueError as e:
            # e.g. a single-label corpus
            logger.warning(f"Classifier training failed ({e}), retrying with built-in corpus")
            samples = builtin_training_samples()
            pipeline = cls._train(samples)

        return cls(pipeline, sample_count=len(samples))

    @classmethod
    def from_settings(cls, settings: Optional[IncidentIntelSettings] = None) -> "WasteClassifier":
        """Train on the configured training corpus, or the built-in one."""
        settings = settings or IncidentIntelSettings()
        return cls.fit(load_training_corpus(settings.training_corpus_path))

    @staticmethod
    def _train(samples: Sequence[TrainingSample]) -> Pipeline:
        pipeline = _build_pipeline()
        pipeline.fit([s.text for s in samples], [s.label for s in samples])
        return pipeline

    @property
    def labels(self) -> List[str]:
        """Known labels, in model order."""
        return list(self._labels)

    def predict(self, text: Optional[str]) -> ClassificationResult:
        """
        Classify a description.

        Args:
            text: Description text (None is treated as empty)

        Returns:
            ClassificationResult with scores sorted by descending confidence
        """
        with self._lock:
            raw = self._pipeline.decision_function([text or ""])

        raw_scores = np.atleast_1d(np.asarray(raw, dtype=float)[0]).tolist()
        if len(self._labels) == 2 and len(raw_scores) == 1:
            # Binary models report only the positive-class margin
            raw_scores = [0.0, raw_scores[0]]

        probabilities = softmax(raw_scores)
        scores = sorted(
            (
                ClassificationScore(label=label, confidence=probability)
                for label, probability in zip(self._labels, probabilities)
            ),
            key=lambda s: s.confidence,
            reverse=True,
        )

        label = scores[0].label if scores else UNKNOWN_LABEL
        top_confidence = scores[0].confidence if scores else 0.0
        logger.debug(f"Classified as {label} (confidence={top_confidence:.3f})")

        return ClassificationResult(label=label, scores=scores)
