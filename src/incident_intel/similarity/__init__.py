"""Nearest-neighbour duplicate search."""

from incident_intel.similarity.matcher import (
    SimilarityMatcher,
    cosine_similarity,
    rank_candidates,
)

__all__ = [
    "SimilarityMatcher",
    "cosine_similarity",
    "rank_candidates",
]
