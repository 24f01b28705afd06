from datetime import datetime
from typing import List, Optional
import logging

from incident_intel.classifiers import WasteClassifier
from incident_intel.config import IncidentIntelSettings
from incident_intel.embeddings import TextFeaturizer
from incident_intel.models import (
    AnomalyPoint,
    CategoryCount,
    ClassificationResult,
    DuplicateCheck,
    IncidentRecord,
    SimilarityMatch,
    TrendSummary,
)
from incident_intel.similarity import SimilarityMatcher
from incident_intel.storage import IncidentSnapshotProvider
from incident_intel.trends import (
    count_since,
    daily_counts,
    detect_spikes,
    format_admin_summary,
    last_day_spike,
    top_categories,
)
from incident_intel.utils.dates import window_start

logger = logging.getLogger(__name__)


class IncidentNotFoundError(LookupError):
    """Raised when an incident ID is not present in the record store."""


class IncidentIntelligenceService:
    """
    Orchestrates featurization, classification, duplicate search and trends.

    The service never persists anything: it reads snapshots from the store
    and returns new or updated records for the caller to save.
    """

    def __init__(
        self,
        featurizer: TextFeaturizer,
        classifier: WasteClassifier,
        store: IncidentSnapshotProvider,
        settings: Optional[IncidentIntelSettings] = None,
    ):
        self.featurizer = featurizer
        self.classifier = classifier
        self.store = store
        self.settings = settings or IncidentIntelSettings()
        self.matcher = SimilarityMatcher(store)

    def vectorize(self, text: Optional[str]) -> List[float]:
        return self.featurizer.transform(text)

    def classify(self, text: Optional[str]) -> ClassificationResult:
        return self.classifier.predict(text)

    def assess_new(self, incident: IncidentRecord) -> DuplicateCheck:
        """
        Prepare a newly reported incident for storage.

        Computes the text vector if missing, looks up the best existing match
        in the same location and fills in the category when it is blank.

        Args:
            incident: Incident as submitted (not yet stored)

        Returns:
            DuplicateCheck with the enriched incident and duplicate verdict
        """
        vector = incident.text_vector
        if vector is None:
            vector = self.featurizer.transform(incident.description)

        match, score = self.matcher.find_best(vector, locality=incident.location)

        category = incident.category
        if not category.strip():
            category = self.classifier.predict(incident.description).label

        enriched = incident.model_copy(update={"text_vector": vector, "category": category})
        possible_duplicate = match is not None and score >= self.settings.duplicate_threshold

        logger.info(
            f"Assessed incident {enriched.id}: category={category}, "
            f"best_match={match.id if match else None}, similarity={score:.3f}, "
            f"possible_duplicate={possible_duplicate}"
        )

        return DuplicateCheck(
            incident=enriched,
            possible_duplicate=possible_duplicate,
            duplicate_of=match.id if match else None,
            similarity=score,
        )

    def apply_update(
        self,
        existing: IncidentRecord,
        description: Optional[str] = None,
        location: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> IncidentRecord:
        """
        Apply an edit to an incident and refresh derived fields.

        The description is always replaced (None means empty text). When it
        changes, the vector is recomputed, and so is the category unless one
        was supplied with the edit.

        Args:
            existing: Current stored incident
            description: New description
            location: New location (None keeps the current one)
            category: New category (None keeps the current one)
            status: New status (blank keeps the current one)

        Returns:
            Updated copy of the incident
        """
        new_description = description or ""
        description_changed = existing.description != new_description

        updates = {"description": new_description}
        if location is not None:
            updates["location"] = location
        if category is not None:
            updates["category"] = category
        if status and status.strip():
            updates["status"] = status

        if description_changed:
            updates["text_vector"] = self.featurizer.transform(new_description)
            if category is None:
                updates["category"] = self.classifier.predict(new_description).label

        # Validated so an unknown status is rejected
        updated = IncidentRecord.model_validate({**existing.model_dump(), **updates})

        logger.debug(
            f"Updated incident {existing.id}: description_changed={description_changed}, "
            f"fields={sorted(updates)}"
        )
        return updated

    def similar_to(self, incident_id: str, take: Optional[int] = None) -> List[SimilarityMatch]:
        """
        Find incidents similar to a stored one, excluding itself.

        Raises:
            IncidentNotFoundError: If no incident has this ID
        """
        incident = next((i for i in self.store.all_records() if i.id == incident_id), None)
        if incident is None:
            raise IncidentNotFoundError(f"Incident {incident_id} not found")

        vector = incident.text_vector
        if vector is None:
            vector = self.featurizer.transform(incident.description)

        return self.matcher.find_top(
            vector,
            locality=incident.location,
            exclude_id=incident.id,
            take=take if take is not None else self.settings.similar_take,
        )

    def trends(self, days: Optional[int] = None, now: Optional[datetime] = None) -> TrendSummary:
        """Daily counts over the trailing window plus the last-day spike flag."""
        days = days if days is not None else self.settings.trend_days
        records = self.store.records_since(window_start(days, now))
        return last_day_spike(daily_counts(records, days, now))

    def anomalies(
        self,
        days: Optional[int] = None,
        window: Optional[int] = None,
        threshold: Optional[float] = None,
        now: Optional[datetime] = None,
    ) -> List[AnomalyPoint]:
        """Rolling z-score spike detection over the trailing window."""
        days = days if days is not None else self.settings.anomaly_days
        records = self.store.records_since(window_start(days, now))
        return detect_spikes(
            records,
            total_days=days,
            window=window if window is not None else self.settings.anomaly_window,
            threshold=threshold if threshold is not None else self.settings.anomaly_threshold,
            now=now,
        )

    def top_categories(self, top: Optional[int] = None) -> List[CategoryCount]:
        return top_categories(
            self.store.all_records(),
            top if top is not None else self.settings.top_categories,
        )

    def admin_summary(self, now: Optional[datetime] = None) -> str:
        """One-line summary of recent volume and the most common categories."""
        days = self.settings.summary_days
        recent = self.store.records_since(window_start(days, now))
        return format_admin_summary(
            days,
            count_since(recent, days, now),
            self.top_categories(self.settings.summary_top_categories),
        )
