from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    rapidapi_key: str
    job_location: str
    live_jobs_enabled: bool
    max_live_jobs: int
    log_level: str


def load_settings() -> Settings:
    return Settings(
        rapidapi_key=_env_str("RAPIDAPI_KEY", ""),
        job_location=_env_str("RISKREADY_JOB_LOCATION", "United States"),
        live_jobs_enabled=_env_bool("RISKREADY_LIVE_JOBS", True),
        max_live_jobs=max(0, _env_int("RISKREADY_MAX_JOBS", 8)),
        log_level=_env_str("RISKREADY_LOG_LEVEL", "INFO").upper(),
    )
