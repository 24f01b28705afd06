"""
Daily incident volume and spike detection.

Incidents are bucketed by UTC calendar day. Each day's count is scored
against a trailing window of the preceding days with a population z-score.
Days without incidents are not inserted into the series, so a window of
history may span calendar gaps.
"""

import logging
import math
from collections import Counter
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from incident_intel.models import AnomalyPoint, DailyCount, IncidentRecord, TrendSummary
from incident_intel.utils.dates import as_utc, utc_day, window_start

logger = logging.getLogger(__name__)

# Configuration constants
MIN_WINDOW = 3
DEFAULT_WINDOW = 7
DEFAULT_THRESHOLD = 2.0
DEFAULT_ANOMALY_DAYS = 30
DEFAULT_TREND_DAYS = 14

# Coarse last-day check
LAST_DAY_HISTORY = 7
LAST_DAY_SPIKE_THRESHOLD = 2.0


def z_score(value: float, history: Sequence[float]) -> float:
    """
    Population z-score of `value` relative to `history`.

    Returns 0.0 for an empty or flat history (std = 0).
    """
    if not history:
        return 0.0

    mean = sum(history) / len(history)
    variance = sum((h - mean) ** 2 for h in history) / len(history)
    std = math.sqrt(variance)
    if std == 0:
        return 0.0
    return (value - mean) / std


def daily_counts(
    records: Iterable[IncidentRecord],
    window_days: int = DEFAULT_TREND_DAYS,
    now: Optional[datetime] = None,
) -> List[DailyCount]:
    """
    Count incidents per UTC calendar day within a trailing window.

    Args:
        records: Incidents to aggregate (any order)
        window_days: Only count incidents since UTC midnight `window_days` days ago
        now: Reference time (default: current time)

    Returns:
        One DailyCount per day with at least one incident, ascending by day
    """
    start = window_start(window_days, now)
    counts = Counter(
        utc_day(record.timestamp) for record in records if as_utc(record.timestamp) >= start
    )
    return [DailyCount(day=day, count=count) for day, count in sorted(counts.items())]


def score_series(
    series: Sequence[DailyCount],
    window: int = DEFAULT_WINDOW,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[AnomalyPoint]:
    """
    Flag days whose count spikes above the preceding days.

    Each point is compared with the `window` points immediately before it.
    Points with fewer than `window` predecessors are warm-up points: they
    get a z-score of 0 and are never anomalous.

    Args:
        series: Daily counts, ascending by day
        window: History length (values below 3 are raised to 3)
        threshold: Minimum z-score (inclusive) for an anomaly

    Returns:
        One AnomalyPoint per input point, same order
    """
    window = max(MIN_WINDOW, window)

    points = []
    for i, entry in enumerate(series):
        if i < window:
            points.append(
                AnomalyPoint(day=entry.day, count=entry.count, z_score=0.0, is_anomaly=False)
            )
            continue

        history = [float(prev.count) for prev in series[i - window : i]]
        z = z_score(entry.count, history)
        points.append(
            AnomalyPoint(day=entry.day, count=entry.count, z_score=z, is_anomaly=z >= threshold)
        )

    flagged = sum(1 for p in points if p.is_anomaly)
    logger.debug(
        f"Scored {len(points)} days (window={window}, threshold={threshold}): {flagged} anomalies"
    )
    return points


def detect_spikes(
    records: Iterable[IncidentRecord],
    total_days: int = DEFAULT_ANOMALY_DAYS,
    window: int = DEFAULT_WINDOW,
    threshold: float = DEFAULT_THRESHOLD,
    now: Optional[datetime] = None,
) -> List[AnomalyPoint]:
    """
    Aggregate incidents per day and flag spikes.

    Args:
        records: Incidents to analyse
        total_days: Trailing window of days to aggregate
        window: History length for each z-score (minimum 3)
        threshold: Minimum z-score (inclusive) for an anomaly
        now: Reference time (default: current time)

    Returns:
        Scored daily series, ascending by day
    """
    return score_series(daily_counts(records, total_days, now), window, threshold)


def last_day_spike(series: Sequence[DailyCount]) -> TrendSummary:
    """
    Coarse spike check of the most recent day.

    Compares the last count with exactly the 7 entries before it. With fewer
    than 8 entries there is not enough history and no spike is reported.

    Args:
        series: Daily counts, ascending by day

    Returns:
        TrendSummary with the series, the last-day z-score and the spike flag
    """
    data = list(series)
    if len(data) < LAST_DAY_HISTORY + 1:
        return TrendSummary(data=data, last_day_z_score=None, spike=False)

    history = [float(entry.count) for entry in data[-(LAST_DAY_HISTORY + 1) : -1]]
    z = z_score(data[-1].count, history)

    if z >= LAST_DAY_SPIKE_THRESHOLD:
        logger.info(f"Incident spike on {data[-1].day}: count={data[-1].count}, z={z:.2f}")

    return TrendSummary(data=data, last_day_z_score=z, spike=z >= LAST_DAY_SPIKE_THRESHOLD)
