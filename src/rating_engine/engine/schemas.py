# src/rating_engine/engine/schemas.py
from __future__ import annotations

from typing import Annotated, Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError, field_validator

from rating_engine.pricing.errors import InvalidTypeError, MissingFieldError

REVENUE_REQUIRED = "Revenue is required"
STATE_REQUIRED = "State is required"
BUSINESS_REQUIRED = "Business type is required"
REVENUE_INVALID = "Revenue must be a positive number"

# bool is rejected by both strict types; NaN/inf by allow_inf_nan
Revenue = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)],
]


class RatingRequest(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    revenue: Revenue
    state: StrictStr = Field(min_length=1)
    business: StrictStr = Field(min_length=1)

    @field_validator("revenue")
    @classmethod
    def _fits_in_float(cls, v: Union[int, float]) -> Union[int, float]:
        # JSON integers can be arbitrarily long
        try:
            float(v)
        except OverflowError as e:
            raise ValueError("revenue out of range") from e
        return v

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


def _is_present_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def parse_rating_request(payload: Any) -> RatingRequest:
    """
    Validate a decoded JSON body and build a RatingRequest.

    Checks run in a fixed order and stop at the first failure:
    revenue present -> state present -> business present -> revenue valid.
    Numeric-looking strings are not coerced.
    """
    body: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

    revenue = body.get("revenue")
    state = body.get("state")
    business = body.get("business")

    if revenue is None:
        raise MissingFieldError(REVENUE_REQUIRED)
    if not _is_present_text(state):
        raise MissingFieldError(STATE_REQUIRED)
    if not _is_present_text(business):
        raise MissingFieldError(BUSINESS_REQUIRED)

    # presence is settled above, so anything pydantic rejects is the revenue
    try:
        return RatingRequest.model_validate({"revenue": revenue, "state": state, "business": business})
    except ValidationError as e:
        raise InvalidTypeError(REVENUE_INVALID) from e
