from __future__ import annotations

from riskready.config import load_settings


def test_defaults(monkeypatch):
    for name in ("RAPIDAPI_KEY", "RISKREADY_JOB_LOCATION", "RISKREADY_LIVE_JOBS", "RISKREADY_MAX_JOBS", "RISKREADY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.rapidapi_key == ""
    assert settings.job_location == "United States"
    assert settings.live_jobs_enabled is True
    assert settings.max_live_jobs == 8
    assert settings.log_level == "INFO"


def test_overrides_and_malformed_values(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", " abc ")
    monkeypatch.setenv("RISKREADY_LIVE_JOBS", "off")
    monkeypatch.setenv("RISKREADY_MAX_JOBS", "lots")
    monkeypatch.setenv("RISKREADY_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.rapidapi_key == "abc"
    assert settings.live_jobs_enabled is False
    assert settings.max_live_jobs == 8
    assert settings.log_level == "DEBUG"
