# src/rating_engine/pricing/config.py
"""
Rate table configuration.

Two lookup tables drive every quote:
- state_rates: premium per $1000 of revenue, keyed by upper-case state code
- business_multipliers: scaling factor, keyed by lower-case business category

Each table carries a DEFAULT entry used for codes it does not list.
Tables are built once (built-in values, or a JSON file) and are read-only
afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from rating_engine.pricing.errors import RateTableError
from rating_engine.utils.io import read_json

logger = logging.getLogger(__name__)

DEFAULT_KEY = "DEFAULT"

STATE_RATES: Mapping[str, float] = MappingProxyType(
    {
        "CA": 2.5,
        "NY": 2.8,
        "TX": 2.0,
        "FL": 2.3,
        "IL": 2.2,
        "PA": 2.1,
        "OH": 1.9,
        "GA": 2.0,
        "NC": 1.8,
        "MI": 2.0,
        DEFAULT_KEY: 2.0,
    }
)

BUSINESS_MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        "retail": 1.0,
        "restaurant": 1.5,
        "technology": 0.8,
        "construction": 2.0,
        "healthcare": 1.3,
        "manufacturing": 1.4,
        "consulting": 0.7,
        "transportation": 1.6,
        DEFAULT_KEY: 1.0,
    }
)


@dataclass(frozen=True)
class RateTable:
    state_rates: Mapping[str, float] = field(default_factory=lambda: STATE_RATES)
    business_multipliers: Mapping[str, float] = field(default_factory=lambda: BUSINESS_MULTIPLIERS)

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            "states": dict(self.state_rates),
            "businesses": dict(self.business_multipliers),
        }


def _freeze_table(name: str, raw: Any, key_case: str) -> Mapping[str, float]:
    """
    Validate one table from a JSON document and return a read-only copy.

    Keys are normalised to the case used at lookup time (upper for states,
    lower for businesses); the DEFAULT key keeps its spelling.
    """
    if not isinstance(raw, dict) or not raw:
        raise RateTableError(f"Rate table '{name}' must be a non-empty object")

    out: dict[str, float] = {}
    for k, v in raw.items():
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v < 0:
            raise RateTableError(f"Rate table '{name}' has an invalid value for '{k}': {v!r}")
        key = DEFAULT_KEY if k.upper() == DEFAULT_KEY else (k.upper() if key_case == "upper" else k.lower())
        out[key] = float(v)

    if DEFAULT_KEY not in out:
        raise RateTableError(f"Rate table '{name}' is missing a {DEFAULT_KEY} entry")

    return MappingProxyType(out)


def load_rate_table(path: Optional[Union[str, Path]] = None) -> RateTable:
    """
    Build the rate table used for the lifetime of the process.

    No path -> built-in tables.
    Path    -> JSON file shaped like {"states": {...}, "businesses": {...}}.
    """
    if path is None:
        return RateTable()

    try:
        doc = read_json(path)
    except (OSError, ValueError) as e:
        raise RateTableError(f"Could not read rate table from {path}: {e}") from e

    if not isinstance(doc, dict):
        raise RateTableError(f"Rate table file {path} must contain a JSON object")

    table = RateTable(
        state_rates=_freeze_table("states", doc.get("states"), key_case="upper"),
        business_multipliers=_freeze_table("businesses", doc.get("businesses"), key_case="lower"),
    )
    logger.info(
        "Rate table loaded",
        extra={
            "path": str(path),
            "states": len(table.state_rates),
            "businesses": len(table.business_multipliers),
        },
    )
    return table
