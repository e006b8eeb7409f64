"""
Quail Calculator — Model Tests
Verifies the cycle economics, rounding, snapshot and display helpers.
"""

import json
import math

import pytest

from quail_model import (
    DEFAULT_INPUTS,
    WEEKS_PER_MONTH,
    QuailInputs,
    compute,
    format_count,
    format_currency,
    has_non_finite,
    round_half_up,
    snapshot,
    snapshot_json,
)


# =============================================================================
# ROUNDING
# =============================================================================

def test_round_half_up():
    """Halves go up, toward positive infinity."""
    print("Testing round_half_up...")

    assert round_half_up(2.5) == 3, f"Expected 3, got {round_half_up(2.5)}"
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4) == 2
    assert round_half_up(-2.5) == -2, f"Expected -2, got {round_half_up(-2.5)}"
    assert round_half_up(-2.6) == -3
    assert round_half_up(0) == 0
    assert isinstance(round_half_up(79.6), int)

    assert math.isnan(round_half_up(float("nan")))
    assert round_half_up(float("inf")) == float("inf")
    assert round_half_up(float("-inf")) == float("-inf")

    print("  ✓ Rounding tests passed")


# =============================================================================
# CALCULATION MODEL
# =============================================================================

def test_default_scenario():
    """The starter flock reproduces the reference figures."""
    print("Testing default scenario...")

    r = compute(QuailInputs())

    assert r.females == 80, f"Expected 80, got {r.females}"
    assert r.eggs_week == 400
    assert r.eggs_month == pytest.approx(1732)
    assert r.egg_rev_month == pytest.approx(173200)
    assert r.fertile_cycle == pytest.approx(2720)
    assert r.chicks_cycle == 2176, f"Expected 2176, got {r.chicks_cycle}"
    assert r.chick_rev_cycle == 3264000
    assert r.feed_kg_per_cycle == pytest.approx(84)
    assert r.feed_cost_cycle == pytest.approx(67200)
    assert r.other_cost_cycle == pytest.approx(55427.2517, abs=1e-3)
    assert r.net_egg_cycle == pytest.approx(197372.748, abs=1e-2)
    assert r.net_chick_cycle == pytest.approx(3141372.748, abs=1e-2)

    print("  ✓ Default scenario passed")


def test_defaults_match_form():
    """QuailInputs() carries the form defaults."""
    inputs = QuailInputs()
    for name, value in DEFAULT_INPUTS.items():
        assert getattr(inputs, name) == value, f"{name}: {getattr(inputs, name)} != {value}"


def test_females_rounded():
    """Hen count is a whole number before it feeds egg output."""
    print("Testing female rounding...")

    r = compute(QuailInputs(birds=37, pct_female=70))  # 25.9 hens
    assert r.females == 26, f"Expected 26, got {r.females}"
    assert r.eggs_week == 26 * 5

    r = compute(QuailInputs(birds=5, pct_female=50))  # 2.5 hens
    assert r.females == 3, f"Expected 3, got {r.females}"

    for birds in range(0, 60, 7):
        for pct in (0, 33, 50, 67, 100):
            females = compute(QuailInputs(birds=birds, pct_female=pct)).females
            assert females == round_half_up(birds * pct / 100)
            assert females >= 0 and females == int(females)

    print("  ✓ Female rounding passed")


def test_only_counts_are_rounded():
    """Intermediate money and feed figures keep full precision."""
    r = compute(QuailInputs(birds=37, pct_female=70, fertility=83, hatch_rate=65,
                            feed_gram_per_bird=13.7, cycle_weeks=7))

    assert r.fertile_cycle == pytest.approx(26 * 5 * 7 * 0.83)
    assert r.fertile_cycle != round(r.fertile_cycle)
    assert r.chicks_cycle == round_half_up(r.fertile_cycle * 0.65)
    assert r.feed_kg_per_cycle == pytest.approx(13.7 * 37 / 1000 * 7 * 7)
    assert r.other_cost_cycle == pytest.approx(30000 * 7 / WEEKS_PER_MONTH)


def test_determinism():
    """Same inputs, bit-identical results."""
    inputs = QuailInputs(birds=250, pct_female=65.5, egg_price=120.25, cycle_weeks=6)
    assert compute(inputs) == compute(inputs)


def test_monotonic_in_prices():
    """Egg price lifts egg profit; feed price cuts both profits."""
    print("Testing price monotonicity...")

    low = compute(QuailInputs(egg_price=90))
    high = compute(QuailInputs(egg_price=110))
    assert high.egg_rev_month > low.egg_rev_month
    assert high.net_egg_cycle > low.net_egg_cycle

    cheap = compute(QuailInputs(feed_price_kg=700))
    dear = compute(QuailInputs(feed_price_kg=900))
    assert dear.net_chick_cycle < cheap.net_chick_cycle
    assert dear.net_egg_cycle < cheap.net_egg_cycle

    print("  ✓ Monotonicity passed")


def test_garbage_inputs_pass_through():
    """Negative and zero inputs are not clamped; NaN propagates."""
    print("Testing garbage inputs...")

    r = compute(QuailInputs(birds=-10))
    assert r.females == -8
    assert r.feed_kg_per_cycle < 0

    r = compute(QuailInputs(birds=0, other_costs_month=0))
    assert r.net_chick_cycle == 0
    assert r.net_egg_cycle == 0
    assert not has_non_finite(r)

    r = compute(QuailInputs(egg_price=float("nan")))
    assert math.isnan(r.net_egg_cycle)
    assert r.net_chick_cycle == pytest.approx(3141372.748, abs=1e-2)
    assert has_non_finite(r)

    r = compute(QuailInputs(pct_female=float("inf")))
    assert r.females == float("inf")
    assert has_non_finite(r)

    print("  ✓ Garbage inputs passed")


# =============================================================================
# SNAPSHOT & FORMATTING
# =============================================================================

def test_snapshot_contains_all_fields():
    """Snapshot holds all eleven inputs, birds included, and every result."""
    inputs = QuailInputs()
    data = snapshot(inputs, compute(inputs))

    assert set(data) == {"inputs", "results"}
    assert len(data["inputs"]) == 11
    assert data["inputs"]["birds"] == 100
    assert data["inputs"]["pctFemale"] == 80
    assert data["inputs"]["eggsPerHenWeek"] == 5
    assert data["inputs"]["feedGramPerBird"] == 15
    assert len(data["results"]) == 12
    assert data["results"]["chicksCycle"] == 2176
    assert "netChickCycle" in data["results"]


def test_snapshot_json_roundtrip():
    inputs = QuailInputs(hatch_rate=75)
    results = compute(inputs)
    data = json.loads(snapshot_json(inputs, results))

    assert data["inputs"]["hatchRate"] == 75
    assert data["results"]["netEggCycle"] == pytest.approx(results.net_egg_cycle)


def test_formatting():
    print("Testing formatting...")

    assert format_count(2176) == "2,176"
    assert format_count(399.5) == "400"
    assert format_currency(3141372.748) == "MK 3,141,373"
    assert format_currency(-1234.4) == "MK -1,234"
    assert format_currency(float("nan")) == "MK nan"
    assert format_currency(float("inf")) == "MK inf"

    print("  ✓ Formatting passed")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
