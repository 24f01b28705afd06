"""
Runtime configuration for incident-intel.

Values are read from the environment (prefix ``INCIDENT_INTEL_``) or a local
``.env`` file, e.g. ``INCIDENT_INTEL_TRAINING_CORPUS_PATH=data/labeled.json``.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IncidentIntelSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INCIDENT_INTEL_",
        env_file=".env",
        extra="ignore",
    )

    # Corpus sources (optional, built-in corpora are used when absent)
    bootstrap_corpus_path: Optional[str] = None
    training_corpus_path: Optional[str] = None

    # Duplicate detection
    duplicate_threshold: float = Field(default=0.9, ge=0.0, le=1.0)
    similar_take: int = 3

    # Trends and anomalies
    trend_days: int = 14
    anomaly_days: int = 30
    anomaly_window: int = 7
    anomaly_threshold: float = 2.0

    # Admin summary
    summary_days: int = 7
    summary_top_categories: int = 3
    top_categories: int = 5
