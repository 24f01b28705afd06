"""
incident-intel: Featurization, duplicate search, classification and spike detection for incident reports.

Core components:
- embeddings: TF-IDF text featurizer and the TextFeaturizer protocol
- classifiers: Waste-type classifier with softmax-normalised confidences
- similarity: Cosine-similarity duplicate search
- trends: Daily aggregation, rolling z-score anomalies, admin summary
- storage: Record snapshot protocol and an in-memory reference store
- models: Core data models (IncidentRecord, ClassificationResult, etc.)
"""

__version__ = "0.1.0"

from incident_intel.classifiers import WasteClassifier
from incident_intel.config import IncidentIntelSettings
from incident_intel.embeddings import TextFeaturizer, TfidfFeaturizer
from incident_intel.incident_service import IncidentIntelligenceService, IncidentNotFoundError
from incident_intel.models import (
    AnomalyPoint,
    CategoryCount,
    ClassificationResult,
    ClassificationScore,
    DailyCount,
    DuplicateCheck,
    IncidentRecord,
    SimilarityMatch,
    TrainingSample,
    TrendSummary,
)
from incident_intel.similarity import SimilarityMatcher

__all__ = [
    "__version__",
    # Models
    "AnomalyPoint",
    "CategoryCount",
    "ClassificationResult",
    "ClassificationScore",
    "DailyCount",
    "DuplicateCheck",
    "IncidentRecord",
    "SimilarityMatch",
    "TrainingSample",
    "TrendSummary",
    # Components
    "IncidentIntelSettings",
    "TextFeaturizer",
    "TfidfFeaturizer",
    "WasteClassifier",
    "SimilarityMatcher",
    "IncidentIntelligenceService",
    "IncidentNotFoundError",
]
