"""
Cosine-similarity duplicate search over recorded incidents.

The search is a linear scan over the candidate snapshot. A larger deployment
can swap in an index behind `find_top`/`find_best` as long as scoring and the
tie-break (score descending, then arrival order) stay the same.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from incident_intel.models import IncidentRecord, SimilarityMatch
from incident_intel.storage.protocols import IncidentSnapshotProvider

logger = logging.getLogger(__name__)

MIN_TAKE = 1
MAX_TAKE = 10
DEFAULT_TAKE = 3


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Calculate cosine similarity between two vectors.

    Returns 0.0 instead of raising when either vector is empty, the lengths
    differ, or either norm is zero. The result is clamped into [0, 1].
    """
    if len(vec1) == 0 or len(vec2) == 0 or len(vec1) != len(vec2):
        return 0.0

    a = np.asarray(vec1, dtype=float)
    b = np.asarray(vec2, dtype=float)
    denominator = np.linalg.norm(a) * np.linalg.norm(b)
    if denominator == 0 or not np.isfinite(denominator):
        return 0.0

    score = float(np.dot(a, b) / denominator)
    if not np.isfinite(score):
        return 0.0
    return min(1.0, max(0.0, score))


def clamp_take(take: int) -> int:
    return min(MAX_TAKE, max(MIN_TAKE, take))


def rank_candidates(
    vector: Sequence[float],
    candidates: Iterable[IncidentRecord],
    take: int = DEFAULT_TAKE,
) -> List[SimilarityMatch]:
    """
    Score candidates against a query vector and keep the best ones.

    Candidates without a vector are skipped. Only strictly positive scores
    are kept; ties keep the candidates' arrival order.

    Args:
        vector: Query vector
        candidates: Incidents to score (in arrival order)
        take: Number of matches to return (clamped to [1, 10])

    Returns:
        Matches sorted by descending score
    """
    take = clamp_take(take)

    scored = []
    for incident in candidates:
        if incident.text_vector is None:
            continue
        score = cosine_similarity(vector, incident.text_vector)
        if score > 0:
            scored.append(SimilarityMatch(incident=incident, score=score))

    # sorted() is stable, so equal scores stay in arrival order
    ranked = sorted(scored, key=lambda m: m.score, reverse=True)
    return ranked[:take]


class SimilarityMatcher:
    """
    Finds previously recorded incidents similar to a query vector.

    Reads candidates from an IncidentSnapshotProvider and applies the
    locality and exclusion filters itself as well, so providers that ignore
    them still produce correct results.
    """

    def __init__(self, store: IncidentSnapshotProvider):
        self.store = store

    def find_top(
        self,
        vector: Sequence[float],
        locality: Optional[str] = None,
        exclude_id: Optional[str] = None,
        take: int = DEFAULT_TAKE,
    ) -> List[SimilarityMatch]:
        """
        Find the most similar incidents.

        Args:
            vector: Query vector
            locality: Only consider incidents with exactly this location (ignored if blank)
            exclude_id: Never return the incident with this ID
            take: Maximum number of matches (clamped to [1, 10])

        Returns:
            Matches with a strictly positive score, best first
        """
        if locality is not None and not locality.strip():
            locality = None

        candidates = [
            incident
            for incident in self.store.records_with_vectors(locality=locality, exclude_id=exclude_id)
            if (locality is None or incident.location == locality)
            and (exclude_id is None or incident.id != exclude_id)
        ]

        matches = rank_candidates(vector, candidates, take)

        logger.debug(
            f"{len(matches)} matches from {len(candidates)} candidates "
            f"(locality={locality}, exclude_id={exclude_id}, take={clamp_take(take)})"
        )
        return matches

    def find_best(
        self,
        vector: Sequence[float],
        locality: Optional[str] = None,
    ) -> Tuple[Optional[IncidentRecord], float]:
        """
        Find the single most similar incident.

        Returns:
            Tuple of (incident, score), or (None, 0.0) when nothing matches
        """
        matches = self.find_top(vector, locality=locality, take=1)
        if not matches:
            return None, 0.0
        return matches[0].incident, matches[0].score
