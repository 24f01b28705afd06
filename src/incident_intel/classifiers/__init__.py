"""
Incident classification.

Provides the waste-type classifier used to label incidents that are reported
without a category.
"""

from incident_intel.classifiers.waste_classifier import UNKNOWN_LABEL, WasteClassifier, softmax

__all__ = [
    "UNKNOWN_LABEL",
    "WasteClassifier",
    "softmax",
]
