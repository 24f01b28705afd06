"""
Incident volume trends and anomaly detection.

- anomaly: daily aggregation, rolling z-score spike detection, last-day check
- summary: category breakdowns and the administrative summary line
"""

from incident_intel.trends.anomaly import (
    daily_counts,
    detect_spikes,
    last_day_spike,
    score_series,
    z_score,
)
from incident_intel.trends.summary import count_since, format_admin_summary, top_categories

__all__ = [
    "daily_counts",
    "detect_spikes",
    "last_day_spike",
    "score_series",
    "z_score",
    "count_since",
    "format_admin_summary",
    "top_categories",
]
