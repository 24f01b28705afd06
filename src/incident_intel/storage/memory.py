"""
In-memory incident storage implementation.

Provides a simple in-memory record store satisfying the IncidentSnapshotProvider
protocol, suitable for testing and development. Data is lost on restart.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from incident_intel.models import IncidentRecord
from incident_intel.utils.dates import as_utc

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


class InMemoryIncidentStore:
    """
    In-memory implementation of the IncidentSnapshotProvider protocol.

    Records are kept in insertion order; snapshots are returned as copies so
    callers can score them without seeing later mutations.
    """

    def __init__(self):
        self._incidents: Dict[str, IncidentRecord] = {}

        logger.info("InMemoryIncidentStore initialized")

    def add(self, incident: IncidentRecord) -> str:
        """Add an incident to the store."""
        self._incidents[incident.id] = incident.model_copy(deep=True)

        logger.debug(f"Inserted incident {incident.id}: '{incident.description[:50]}...'")
        return incident.id

    def get_by_id(self, incident_id: str) -> Optional[IncidentRecord]:
        """Retrieve a specific incident by its ID."""
        incident = self._incidents.get(incident_id)
        if incident is None:
            return None
        return incident.model_copy(deep=True)

    def update(self, incident: IncidentRecord) -> bool:
        """Replace a stored incident."""
        if incident.id not in self._incidents:
            logger.error(f"Incident {incident.id} not found")
            return False

        self._incidents[incident.id] = incident.model_copy(deep=True)
        logger.debug(f"Updated incident {incident.id}")
        return True

    def delete(self, incident_id: str) -> bool:
        """Remove an incident."""
        if self._incidents.pop(incident_id, None) is None:
            logger.warning(f"Cannot delete incident {incident_id}: not found")
            return False

        logger.info(f"Deleted incident {incident_id}")
        return True

    def list_recent(self, skip: int = 0, take: int = DEFAULT_PAGE_SIZE) -> List[IncidentRecord]:
        """
        Page through incidents, newest first.

        Args:
            skip: Number of incidents to skip (negative values count as 0)
            take: Page size (non-positive means the default, capped at 200)

        Returns:
            Incidents ordered by descending timestamp
        """
        if take <= 0:
            take = DEFAULT_PAGE_SIZE
        take = min(take, MAX_PAGE_SIZE)
        skip = max(0, skip)

        ordered = sorted(
            self._incidents.values(), key=lambda i: as_utc(i.timestamp), reverse=True
        )
        return [i.model_copy(deep=True) for i in ordered[skip : skip + take]]

    def records_with_vectors(
        self,
        locality: Optional[str] = None,
        exclude_id: Optional[str] = None,
    ) -> List[IncidentRecord]:
        """Return all incidents carrying a text vector."""
        results = []
        for incident in self._incidents.values():
            if incident.text_vector is None:
                continue
            if locality and locality.strip() and incident.location != locality:
                continue
            if exclude_id is not None and incident.id == exclude_id:
                continue
            results.append(incident.model_copy(deep=True))

        return results

    def records_since(self, start: datetime) -> List[IncidentRecord]:
        """Return all incidents reported at or after `start`."""
        start = as_utc(start)
        return [
            incident.model_copy(deep=True)
            for incident in self._incidents.values()
            if as_utc(incident.timestamp) >= start
        ]

    def all_records(self) -> List[IncidentRecord]:
        return [incident.model_copy(deep=True) for incident in self._incidents.values()]

    def clear(self):
        """Clear ALL incidents from the store."""
        count = len(self._incidents)
        self._incidents.clear()
        logger.info(f"Cleared all incidents ({count} total)")
