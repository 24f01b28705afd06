"""
Unit tests for the in-memory incident store.

Tests CRUD, paging, snapshot filters and snapshot isolation.
"""

from datetime import datetime, timedelta, timezone

import pytest

from incident_intel.models import IncidentRecord
from incident_intel.storage import IncidentSnapshotProvider, InMemoryIncidentStore


@pytest.fixture
def store():
    """Create a fresh in-memory incident store."""
    return InMemoryIncidentStore()


@pytest.fixture
def base_time():
    return datetime(2025, 3, 20, 12, 0, tzinfo=timezone.utc)


def test_add_and_get(store):
    incident = IncidentRecord(description="Paint buckets dumped", location="Harbor")

    incident_id = store.add(incident)
    fetched = store.get_by_id(incident_id)

    assert fetched is not None
    assert fetched.description == "Paint buckets dumped"
    assert fetched.status == "open"


def test_get_nonexistent(store):
    assert store.get_by_id("missing") is None


def test_update(store):
    incident = IncidentRecord(description="before")
    store.add(incident)

    updated = incident.model_copy(update={"description": "after", "status": "resolved"})

    assert store.update(updated) is True
    assert store.get_by_id(incident.id).description == "after"
    assert store.get_by_id(incident.id).status == "resolved"


def test_update_nonexistent(store):
    assert store.update(IncidentRecord(description="ghost")) is False


def test_delete(store):
    incident = IncidentRecord()
    store.add(incident)

    assert store.delete(incident.id) is True
    assert store.delete(incident.id) is False
    assert store.get_by_id(incident.id) is None


def test_list_recent_newest_first(store, base_time):
    for i in range(5):
        store.add(IncidentRecord(description=f"incident {i}", timestamp=base_time + timedelta(hours=i)))

    page = store.list_recent(skip=1, take=2)

    assert [i.description for i in page] == ["incident 3", "incident 2"]


@pytest.mark.parametrize("take,expected", [(0, 50), (-1, 50), (10, 10), (500, 200)])
def test_list_recent_clamps_take(store, base_time, take, expected):
    for i in range(250):
        store.add(IncidentRecord(timestamp=base_time + timedelta(minutes=i)))

    assert len(store.list_recent(skip=-3, take=take)) == expected


def test_records_with_vectors_filters(store):
    a = IncidentRecord(location="Park", text_vector=[1.0])
    b = IncidentRecord(location="Harbor", text_vector=[1.0])
    c = IncidentRecord(location="Park")
    d = IncidentRecord(location="Park", text_vector=[0.5])
    for incident in (a, b, c, d):
        store.add(incident)

    assert [i.id for i in store.records_with_vectors()] == [a.id, b.id, d.id]
    assert [i.id for i in store.records_with_vectors(locality="Park")] == [a.id, d.id]
    assert [i.id for i in store.records_with_vectors(locality="Park", exclude_id=a.id)] == [d.id]
    assert [i.id for i in store.records_with_vectors(locality=" ")] == [a.id, b.id, d.id]


def test_records_since_handles_naive_timestamps(store, base_time):
    store.add(IncidentRecord(description="old", timestamp=base_time - timedelta(days=3)))
    store.add(IncidentRecord(description="naive", timestamp=datetime(2025, 3, 20, 9, 0)))

    recent = store.records_since(base_time - timedelta(days=1))

    assert [i.description for i in recent] == ["naive"]


def test_snapshots_are_copies(store):
    """Mutating a snapshot does not change the store."""
    incident = IncidentRecord(text_vector=[1.0, 2.0])
    store.add(incident)

    snapshot = store.records_with_vectors()[0]
    snapshot.text_vector.append(3.0)

    assert store.get_by_id(incident.id).text_vector == [1.0, 2.0]


def test_clear(store):
    store.add(IncidentRecord())
    store.clear()

    assert store.all_records() == []


def test_store_satisfies_protocol(store):
    provider: IncidentSnapshotProvider = store
    assert provider.all_records() == []
