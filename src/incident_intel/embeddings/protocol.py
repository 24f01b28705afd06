"""
Text featurizer protocol for incident-intel.

Provides a unified interface for turning incident descriptions into dense
vectors for duplicate detection.
"""

from typing import List, Optional, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class TextFeaturizer(Protocol):
    """
    Protocol for text featurizers.

    All implementations must:

    1. Return deterministic vectors for the same input
    2. Return vectors of `dimension` length for every input, including empty text
    3. Never raise for empty or missing text
    4. Be safe to call from concurrent request handlers

    Example:
        >>> featurizer = TfidfFeaturizer.fit(["Oil drums leaking in yard"])
        >>> vector = featurizer.transform("Oil leak")
        >>> len(vector) == featurizer.dimension
        True
    """

    @property
    def dimension(self) -> int:
        """
        Vector dimension produced by this featurizer.

        Vectors from different fitted instances are not comparable, even when
        their dimensions happen to match.
        """
        ...

    def transform(self, text: Optional[str]) -> List[float]:
        """
        Featurize a single description.

        Args:
            text: Description to featurize (None is treated as empty text)

        Returns:
            Non-negative feature vector of `dimension` length
        """
        ...
