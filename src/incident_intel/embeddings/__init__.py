"""
Text featurization for incident-intel.

Provides a protocol-based featurizer interface with a scikit-learn adapter:
- TfidfFeaturizer: TF-IDF over word and character n-grams
"""

from incident_intel.embeddings.protocol import TextFeaturizer
from incident_intel.embeddings.tfidf_featurizer import TfidfFeaturizer, build_text_features

__all__ = [
    "TextFeaturizer",
    "TfidfFeaturizer",
    "build_text_features",
]
