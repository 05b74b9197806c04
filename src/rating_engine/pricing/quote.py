# src/rating_engine/pricing/quote.py
"""
Premium calculation and quote output.

Provides:
- round2: the one rounding routine (half-up on the cent value)
- lookup_with_fallback: table lookup resolving unknown codes to DEFAULT
- compute_premium: premium + breakdown from validated inputs
- generate_quote_id: per-call correlation token (Q-XXXXX)

premium = round2((revenue / 1000) * state_rate * business_multiplier)
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Union

import numpy as np

from rating_engine.pricing.config import DEFAULT_KEY, RateTable

Number = Union[int, float]


@dataclass(frozen=True)
class RatingBreakdown:
    baseRate: float
    stateMultiplier: float
    businessMultiplier: float
    revenue: Number


@dataclass(frozen=True)
class RatingResult:
    premium: float
    breakdown: RatingBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round2(value: float) -> float:
    """
    Round to 2 decimals, halves rounding up on the cent value
    (not the half-to-even rule of the built-in round()).
    """
    return float(np.floor(float(value) * 100.0 + 0.5) / 100.0)


def lookup_with_fallback(table: Mapping[str, float], key: str) -> float:
    if key in table:
        return table[key]
    return table[DEFAULT_KEY]


def compute_premium(revenue: Number, state: str, business: str, table: RateTable) -> RatingResult:
    """
    Price a validated request.

    State codes are matched upper-case, business categories lower-case;
    anything not in a table falls back to that table's DEFAULT entry.
    """
    state_rate = lookup_with_fallback(table.state_rates, state.upper())
    business_multiplier = lookup_with_fallback(table.business_multipliers, business.lower())

    premium = round2((revenue / 1000) * state_rate * business_multiplier)

    return RatingResult(
        premium=premium,
        breakdown=RatingBreakdown(
            baseRate=state_rate,
            stateMultiplier=state_rate,
            businessMultiplier=business_multiplier,
            revenue=revenue,
        ),
    )


def generate_quote_id() -> str:
    return f"Q-{random.randint(0, 99999):05d}"
