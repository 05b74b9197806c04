# src/rating_engine/engine/service.py
"""
Rating service for the Rating Engine.

Single source of truth:
- raw request dict -> validation -> RatingRequest
- RatingRequest + RateTable -> premium + breakdown
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from rating_engine.engine.schemas import RatingRequest, parse_rating_request
from rating_engine.pricing.config import RateTable, load_rate_table
from rating_engine.pricing.quote import RatingResult, compute_premium
from rating_engine.utils.config import get_settings

logger = logging.getLogger(__name__)


class RatingService:
    def __init__(self, table: Optional[RateTable] = None) -> None:
        self.table = table or RateTable()

    def rate(self, payload: Any) -> RatingResult:
        """
        Validate a raw request and price it.

        Raises MissingFieldError / InvalidTypeError on bad input;
        unknown state or business codes are priced with the DEFAULT entries.
        """
        logger.info("Rating request received", extra={"body": payload})

        request = parse_rating_request(payload)
        return self.rate_request(request)

    def rate_request(self, request: RatingRequest) -> RatingResult:
        result = compute_premium(request.revenue, request.state, request.business, self.table)

        logger.info(
            "Premium calculated",
            extra={
                "premium": result.premium,
                "state": request.state.upper(),
                "business": request.business.lower(),
            },
        )
        return result


# In-process cache (useful for FastAPI startup + AWS Lambda warm invocations)
_CACHED_SERVICE: Optional[RatingService] = None


def get_service(rate_table_path: Optional[Union[str, Path]] = None, force_reload: bool = False) -> RatingService:
    """
    Build and cache the rating service with its rate table.
    Falls back to RATE_TABLE_PATH when no path is given.
    """
    global _CACHED_SERVICE
    if force_reload or _CACHED_SERVICE is None:
        path = rate_table_path if rate_table_path is not None else get_settings().rate_table_path
        _CACHED_SERVICE = RatingService(load_rate_table(path))
    return _CACHED_SERVICE
