"""
Record snapshot protocol.

The record store (database, API client, in-memory, etc.) owns persistence.
The intelligence core only reads snapshots through this interface.
"""

from datetime import datetime
from typing import List, Optional, Protocol

from incident_intel.models import IncidentRecord


class IncidentSnapshotProvider(Protocol):
    """
    Protocol for read access to recorded incidents.

    Implementations must return consistent snapshots: the returned records
    must not be mutated while a caller is scoring them.
    """

    def records_with_vectors(
        self,
        locality: Optional[str] = None,
        exclude_id: Optional[str] = None,
    ) -> List[IncidentRecord]:
        """
        Return all records carrying a computed text vector.

        Args:
            locality: Only return records with exactly this location (ignored if blank)
            exclude_id: Leave out the record with this ID

        Returns:
            Matching records in arrival order
        """
        ...

    def records_since(self, start: datetime) -> List[IncidentRecord]:
        """
        Return all records with a timestamp at or after `start`.

        Args:
            start: Inclusive lower bound (timezone-aware)

        Returns:
            Matching records in arrival order
        """
        ...

    def all_records(self) -> List[IncidentRecord]:
        """Return every record in arrival order."""
        ...
