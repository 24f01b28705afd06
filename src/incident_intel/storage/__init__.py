"""
Storage protocol and reference implementation.

The record store is an external collaborator; incident-intel only reads
snapshots through the IncidentSnapshotProvider protocol.
"""

from incident_intel.storage.memory import InMemoryIncidentStore
from incident_intel.storage.protocols import IncidentSnapshotProvider

__all__ = [
    "IncidentSnapshotProvider",
    "InMemoryIncidentStore",
]
