# src/rating_engine/utils/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key)
    return v if v is not None and v != "" else default


def _env_flag(key: str, default: bool) -> bool:
    v = _env(key)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    rate_table_path: Optional[Path]
    cors_origins: list[str]
    log_level: str
    preload_rate_table: bool


def get_settings() -> Settings:
    """
    Read service settings from environment variables.
    Everything is optional so local runs and tests are frictionless.

    Env:
      RATE_TABLE_PATH     (optional JSON file replacing the built-in rate tables)
      CORS_ORIGINS        (default: *; comma-separated)
      LOG_LEVEL           (default: INFO)
      PRELOAD_RATE_TABLE  (default: true; Lambda cold-start warm-up)
    """
    table_path = _env("RATE_TABLE_PATH")
    origins = _env("CORS_ORIGINS", "*") or "*"
    return Settings(
        rate_table_path=Path(table_path) if table_path else None,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        preload_rate_table=_env_flag("PRELOAD_RATE_TABLE", True),
    )
