# src/rating_engine/pricing/errors.py
"""
Error taxonomy for the rating engine.

Every error carries the human-readable message returned to callers,
the HTTP status the API layer maps it to, and a short machine code.
"""

from __future__ import annotations


class RatingError(Exception):
    status_code: int = 500
    code: str = "rating_error"

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class MissingFieldError(RatingError):
    status_code = 400
    code = "missing_field"


class InvalidTypeError(RatingError):
    status_code = 400
    code = "invalid_type"


class RateTableError(RatingError):
    code = "rate_table_error"
