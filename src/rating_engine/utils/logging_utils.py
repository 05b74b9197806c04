# src/rating_engine/utils/logging_utils.py
from __future__ import annotations

import logging
import sys
from typing import IO, Optional

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "rating-engine"


def build_json_handler(stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    One JSON object per line:
      {"timestamp": ..., "level": ..., "logger": ..., "message": ..., "service": "rating-engine", <extra>...}
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            static_fields={"service": SERVICE_NAME},
            json_default=str,
        )
    )
    return handler


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger (once per process)."""
    root = logging.getLogger()
    root.setLevel(level)

    if getattr(configure_logging, "_configured", False):
        return

    root.handlers = [build_json_handler()]
    configure_logging._configured = True
