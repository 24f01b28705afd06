"""
Unit tests for cosine-similarity duplicate search.

Tests the cosine edge cases, locality filtering, exclusion, clamping of the
result count and the stable tie-break.
"""

import math

import pytest

from incident_intel.models import IncidentRecord
from incident_intel.similarity import SimilarityMatcher, cosine_similarity, rank_candidates
from incident_intel.storage import InMemoryIncidentStore


@pytest.fixture
def store():
    """Create a fresh in-memory incident store."""
    return InMemoryIncidentStore()


@pytest.fixture
def matcher(store):
    return SimilarityMatcher(store)


def test_cosine_identical_vectors():
    assert math.isclose(cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]), 1.0, abs_tol=1e-6)


def test_cosine_orthogonal_vectors():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0


def test_cosine_degenerate_inputs():
    """Empty, zero-norm and mismatched vectors score 0 without raising."""
    assert cosine_similarity([], [1.0]) == 0.0
    assert cosine_similarity([1.0], []) == 0.0
    assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0
    assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0


def test_cosine_opposite_vectors_clamped():
    """Negative similarity is clamped to 0."""
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == 0.0


def test_find_best_returns_highest_cosine(store, matcher):
    """Best match is the candidate closest to the query."""
    store.add(
        IncidentRecord(description="Plastic bottles in park", location="Park", text_vector=[1, 0, 0])
    )
    store.add(
        IncidentRecord(description="Oil spill reported", location="Harbor", text_vector=[0, 1, 0])
    )

    match, score = matcher.find_best([0.0, 0.99, 0.01])

    assert match is not None
    assert match.location == "Harbor"
    assert score > 0.9


def test_find_best_respects_locality(store, matcher):
    """Locality filter keeps the weaker candidate when the other is excluded."""
    store.add(
        IncidentRecord(
            description="Overflowing bins downtown", location="Downtown", text_vector=[0.9, 0.1]
        )
    )
    store.add(
        IncidentRecord(description="River litter", location="Riverbank", text_vector=[0.1, 0.9])
    )

    match, score = matcher.find_best([0.9, 0.1], locality="Riverbank")

    assert match is not None
    assert match.location == "Riverbank"
    assert score < 0.5


def test_find_best_blank_locality_is_ignored(store, matcher):
    store.add(IncidentRecord(location="Downtown", text_vector=[1.0, 0.0]))

    match, _ = matcher.find_best([1.0, 0.0], locality="   ")

    assert match is not None


def test_find_best_no_candidates(matcher):
    """Empty pool yields (None, 0.0)."""
    assert matcher.find_best([1.0, 0.0]) == (None, 0.0)


def test_find_best_only_zero_scores(store, matcher):
    """Candidates scoring 0 are not eligible."""
    store.add(IncidentRecord(text_vector=[0.0, 1.0]))
    store.add(IncidentRecord(text_vector=[1.0, 0.0, 0.0]))

    assert matcher.find_best([1.0, 0.0]) == (None, 0.0)


def test_records_without_vectors_are_skipped(store, matcher):
    store.add(IncidentRecord(description="no vector yet"))
    vectored = IncidentRecord(description="has vector", text_vector=[1.0, 1.0])
    store.add(vectored)

    matches = matcher.find_top([1.0, 1.0], take=10)

    assert [m.incident.id for m in matches] == [vectored.id]


def test_find_top_excludes_id(store, matcher):
    """The excluded incident is never returned."""
    target = IncidentRecord(text_vector=[1.0, 0.0])
    other = IncidentRecord(text_vector=[0.8, 0.2])
    store.add(target)
    store.add(other)

    matches = matcher.find_top([1.0, 0.0], exclude_id=target.id, take=5)

    assert [m.incident.id for m in matches] == [other.id]


@pytest.mark.parametrize("take,expected", [(0, 1), (-5, 1), (3, 3), (50, 10)])
def test_find_top_clamps_take(store, matcher, take, expected):
    """Result count is clamped to [1, 10]."""
    for i in range(12):
        store.add(IncidentRecord(description=f"incident {i}", text_vector=[1.0, i / 10]))

    matches = matcher.find_top([1.0, 0.5], take=take)

    assert len(matches) == expected


def test_find_top_sorted_descending(store, matcher):
    store.add(IncidentRecord(description="far", text_vector=[0.2, 1.0]))
    store.add(IncidentRecord(description="exact", text_vector=[1.0, 0.0]))
    store.add(IncidentRecord(description="near", text_vector=[1.0, 0.3]))

    matches = matcher.find_top([1.0, 0.0], take=3)

    assert [m.incident.description for m in matches] == ["exact", "near", "far"]
    assert matches[0].score >= matches[1].score >= matches[2].score


def test_ties_keep_arrival_order():
    """Equal scores keep candidate order."""
    candidates = [
        IncidentRecord(description="first", text_vector=[1.0, 1.0]),
        IncidentRecord(description="second", text_vector=[1.0, 1.0]),
        IncidentRecord(description="third", text_vector=[1.0, 1.0]),
    ]

    matches = rank_candidates([1.0, 1.0], candidates, take=3)

    assert [m.incident.description for m in matches] == ["first", "second", "third"]


def test_matcher_filters_even_if_provider_does_not():
    """Locality and exclusion are enforced by the matcher itself."""

    class UnfilteredProvider:
        def __init__(self, records):
            self.records = records

        def records_with_vectors(self, locality=None, exclude_id=None):
            return list(self.records)

    keep = IncidentRecord(location="Park", text_vector=[1.0, 0.0])
    wrong_location = IncidentRecord(location="Harbor", text_vector=[1.0, 0.0])
    excluded = IncidentRecord(location="Park", text_vector=[1.0, 0.0])
    matcher = SimilarityMatcher(UnfilteredProvider([wrong_location, excluded, keep]))

    matches = matcher.find_top([1.0, 0.0], locality="Park", exclude_id=excluded.id, take=5)

    assert [m.incident.id for m in matches] == [keep.id]
