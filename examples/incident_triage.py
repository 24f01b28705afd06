"""
Example: Triaging incident reports with incident-intel

Demonstrates:
1. Fitting the featurizer and classifier once at startup
2. Assessing new reports for duplicates and missing categories
3. Finding reports similar to an existing one
4. Daily trends, spike detection and the admin summary

Configure optional corpora through the environment, e.g.:
    INCIDENT_INTEL_TRAINING_CORPUS_PATH=data/labeled_incidents.csv
"""

import logging
from datetime import datetime, timedelta, timezone

from incident_intel import (
    IncidentIntelSettings,
    IncidentIntelligenceService,
    IncidentRecord,
    TfidfFeaturizer,
    WasteClassifier,
)
from incident_intel.storage import InMemoryIncidentStore


def build_service() -> tuple[IncidentIntelligenceService, InMemoryIncidentStore]:
    settings = IncidentIntelSettings()
    store = InMemoryIncidentStore()
    service = IncidentIntelligenceService(
        featurizer=TfidfFeaturizer.from_settings(settings),
        classifier=WasteClassifier.from_settings(settings),
        store=store,
        settings=settings,
    )
    return service, store


def example_duplicate_check(service: IncidentIntelligenceService, store: InMemoryIncidentStore):
    print("\n=== Duplicate check ===")

    reports = [
        ("Old furniture and mattresses left in alley", "Elm St"),
        ("Battery acid leaking beside electric substation", "Harbor"),
        ("Old furniture and mattresses dumped in the alley", "Elm St"),
    ]

    for description, location in reports:
        check = service.assess_new(IncidentRecord(description=description, location=location))
        store.add(check.incident)
        print(
            f"{description[:45]:<45} -> {check.incident.category:<12} "
            f"similarity={check.similarity:.2f} duplicate={check.possible_duplicate}"
        )


def example_similar(service: IncidentIntelligenceService, store: InMemoryIncidentStore):
    print("\n=== Similar incidents ===")

    first = store.list_recent(take=10)[-1]
    for match in service.similar_to(first.id, take=3):
        print(f"{match.score:.2f}  {match.incident.description}")


def example_trends(service: IncidentIntelligenceService, store: InMemoryIncidentStore):
    print("\n=== Trends ===")

    start = datetime.now(timezone.utc) - timedelta(days=10)
    for day, count in enumerate([2, 3, 2, 4, 3, 2, 3, 2, 14]):
        for i in range(count):
            store.add(
                IncidentRecord(
                    description=f"Garbage bags dumped behind store #{i}",
                    category="illegal_dumping",
                    timestamp=start + timedelta(days=day, minutes=i),
                )
            )

    trend = service.trends()
    print(f"Days: {len(trend.data)}, last-day z={trend.last_day_z_score}, spike={trend.spike}")

    for point in service.anomalies(window=5):
        marker = "!" if point.is_anomaly else " "
        print(f"{marker} {point.day} count={point.count:<3} z={point.z_score:.2f}")

    print(service.admin_summary())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    service, store = build_service()
    example_duplicate_check(service, store)
    example_similar(service, store)
    example_trends(service, store)
