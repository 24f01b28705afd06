"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from incident_intel.config import IncidentIntelSettings


def test_defaults(monkeypatch, tmp_path):
    """Defaults apply when nothing is configured."""
    monkeypatch.chdir(tmp_path)

    settings = IncidentIntelSettings()

    assert settings.bootstrap_corpus_path is None
    assert settings.training_corpus_path is None
    assert settings.duplicate_threshold == 0.9
    assert settings.similar_take == 3
    assert settings.trend_days == 14
    assert settings.anomaly_days == 30
    assert settings.anomaly_window == 7
    assert settings.anomaly_threshold == 2.0


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INCIDENT_INTEL_TRAINING_CORPUS_PATH", "/data/labels.json")
    monkeypatch.setenv("INCIDENT_INTEL_ANOMALY_WINDOW", "5")

    settings = IncidentIntelSettings()

    assert settings.training_corpus_path == "/data/labels.json"
    assert settings.anomaly_window == 5


def test_dotenv_file(monkeypatch, tmp_path):
    """Values are read from a local .env file."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("INCIDENT_INTEL_DUPLICATE_THRESHOLD=0.75\n", encoding="utf-8")

    assert IncidentIntelSettings().duplicate_threshold == 0.75


def test_invalid_threshold_rejected(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ValidationError):
        IncidentIntelSettings(duplicate_threshold=1.5)
