"""Utility functions for incident-intel."""

from incident_intel.utils.dates import as_utc, utc_day, window_start

__all__ = ["as_utc", "utc_day", "window_start"]
