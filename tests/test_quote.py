import pytest

from rating_engine.pricing.config import RateTable
from rating_engine.pricing.quote import (
    compute_premium,
    generate_quote_id,
    lookup_with_fallback,
    round2,
)

EXPECTED_STATE_RATES = {
    "CA": 2.5, "NY": 2.8, "TX": 2.0, "FL": 2.3, "IL": 2.2,
    "PA": 2.1, "OH": 1.9, "GA": 2.0, "NC": 1.8, "MI": 2.0,
}
EXPECTED_BUSINESS_MULTIPLIERS = {
    "retail": 1.0, "restaurant": 1.5, "technology": 0.8, "construction": 2.0,
    "healthcare": 1.3, "manufacturing": 1.4, "consulting": 0.7, "transportation": 1.6,
}


def test_round2_rounds_half_cents_up():
    assert round2(0.125) == 0.13
    assert round2(10.0) == 10.0
    assert round2(0.0) == 0.0
    assert round2(199.49999999999997) == 199.5


def test_round2_differs_from_bankers_rounding():
    # exact binary halves: round() goes to even, round2 goes up
    assert round(0.125, 2) == 0.12
    assert round2(0.125) == 0.13
    assert round(0.625, 2) == 0.62
    assert round2(0.625) == 0.63


def test_lookup_with_fallback_uses_default_for_unknown_keys():
    table = {"CA": 2.5, "DEFAULT": 2.0}
    assert lookup_with_fallback(table, "CA") == 2.5
    assert lookup_with_fallback(table, "ZZ") == 2.0
    assert lookup_with_fallback(table, "") == 2.0


@pytest.mark.parametrize("state", list(EXPECTED_STATE_RATES) + ["ZZ"])
@pytest.mark.parametrize("business", list(EXPECTED_BUSINESS_MULTIPLIERS) + ["unknown"])
def test_premium_formula_for_every_state_and_business(state, business):
    revenue = 123456.78
    rate = EXPECTED_STATE_RATES.get(state, 2.0)
    mult = EXPECTED_BUSINESS_MULTIPLIERS.get(business, 1.0)

    result = compute_premium(revenue, state, business, RateTable())

    assert result.premium == round2((revenue / 1000) * rate * mult)
    assert result.breakdown.baseRate == rate
    assert result.breakdown.stateMultiplier == rate
    assert result.breakdown.businessMultiplier == mult
    assert result.breakdown.revenue == revenue


@pytest.mark.parametrize(
    "revenue,state,business,expected",
    [
        (50000, "CA", "retail", 125.0),
        (80000, "GA", "technology", 128.0),
        (100000, "NY", "restaurant", 420.0),
        (200000, "TX", "construction", 800.0),
        (75000, "FL", "healthcare", 224.25),
        (150000, "OH", "consulting", 199.5),
        (100000, "ZZ", "retail", 200.0),
        (100000, "CA", "unknown", 250.0),
        (100000, "NY", "retail", 280.0),
        (100000, "NC", "retail", 180.0),
        (100000, "TX", "consulting", 140.0),
        (0, "CA", "retail", 0.0),
        (1000000000, "CA", "retail", 2500000.0),
        (50000.50, "CA", "retail", 125.0),
        (100, "CA", "retail", 0.25),
    ],
)
def test_known_scenarios(revenue, state, business, expected):
    result = compute_premium(revenue, state, business, RateTable())
    assert result.premium == pytest.approx(expected, abs=1e-9)


def test_lookup_is_case_insensitive():
    a = compute_premium(50000, "ca", "RETAIL", RateTable())
    b = compute_premium(50000, "CA", "retail", RateTable())
    assert a == b


def test_state_codes_are_not_trimmed():
    result = compute_premium(100000, " CA ", "retail", RateTable())
    assert result.breakdown.baseRate == 2.0


def test_to_dict_shape():
    out = compute_premium(50000, "CA", "retail", RateTable()).to_dict()
    assert out == {
        "premium": 125.0,
        "breakdown": {
            "baseRate": 2.5,
            "stateMultiplier": 2.5,
            "businessMultiplier": 1.0,
            "revenue": 50000,
        },
    }


def test_generate_quote_id_format():
    for _ in range(50):
        qid = generate_quote_id()
        assert qid.startswith("Q-")
        assert len(qid) == 7
        assert qid[2:].isdigit()
