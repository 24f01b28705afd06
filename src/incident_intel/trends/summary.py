"""Category breakdowns and the one-line administrative summary."""

from collections import Counter
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from incident_intel.models import CategoryCount, IncidentRecord
from incident_intel.utils.dates import as_utc, window_start

DEFAULT_TOP_CATEGORIES = 5


def top_categories(
    records: Iterable[IncidentRecord], top: int = DEFAULT_TOP_CATEGORIES
) -> List[CategoryCount]:
    """
    Most frequent categories, highest count first.

    Ties keep the order in which categories were first seen.
    """
    # Counter.most_common keeps insertion order for equal counts
    counts = Counter(record.category for record in records)
    return [
        CategoryCount(category=category, count=count)
        for category, count in counts.most_common(max(0, top))
    ]


def count_since(
    records: Iterable[IncidentRecord], days: int, now: Optional[datetime] = None
) -> int:
    start = window_start(days, now)
    return sum(1 for record in records if as_utc(record.timestamp) >= start)


def format_admin_summary(days: int, incident_count: int, top: Sequence[CategoryCount]) -> str:
    """
    Render the administrative one-liner.

    Example:
        >>> format_admin_summary(7, 12, [CategoryCount(category="bulk", count=5)])
        'Last 7 days: 12 incidents. Top types: bulk (5).'
    """
    top_str = ", ".join(f"{c.category} ({c.count})" for c in top)
    return f"Last {days} days: {incident_count} incidents. Top types: {top_str}."
