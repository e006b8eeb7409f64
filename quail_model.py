#!/usr/bin/env python3
"""
Quail Business Calculator Model
===============================
Eggs vs hatchlings: profit per production cycle for a quail flock.

The model is a single pass of arithmetic over eleven business parameters.
Only the hen count and the chick count are rounded; everything else keeps
full precision until it is displayed.

All money values in Malawian kwacha (MK)
"""

import json
import logging
import math
from dataclasses import asdict, astuple, dataclass
from typing import Dict

import numpy as np

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

WEEKS_PER_MONTH = 4.33  # 52 / 12, used for every month <-> week conversion

CURRENCY = "MK"

# Form defaults for a small starter flock
DEFAULT_INPUTS = {
    "birds": 100,
    "pct_female": 80,
    "eggs_per_hen_week": 5,
    "egg_price": 100,

    # Hatching
    "fertility": 85,  # %
    "hatch_rate": 80,  # %
    "chick_price": 1500,

    # Costs
    "feed_gram_per_bird": 15,  # g/bird/day
    "feed_price_kg": 800,
    "other_costs_month": 30000,
    "cycle_weeks": 8,
}


# =============================================================================
# RECORDS
# =============================================================================

@dataclass(frozen=True)
class QuailInputs:
    """Business parameters entered on the form. No bounds are enforced."""

    birds: float = DEFAULT_INPUTS["birds"]
    pct_female: float = DEFAULT_INPUTS["pct_female"]
    eggs_per_hen_week: float = DEFAULT_INPUTS["eggs_per_hen_week"]
    egg_price: float = DEFAULT_INPUTS["egg_price"]
    fertility: float = DEFAULT_INPUTS["fertility"]
    hatch_rate: float = DEFAULT_INPUTS["hatch_rate"]
    chick_price: float = DEFAULT_INPUTS["chick_price"]
    feed_gram_per_bird: float = DEFAULT_INPUTS["feed_gram_per_bird"]
    feed_price_kg: float = DEFAULT_INPUTS["feed_price_kg"]
    other_costs_month: float = DEFAULT_INPUTS["other_costs_month"]
    cycle_weeks: float = DEFAULT_INPUTS["cycle_weeks"]


@dataclass(frozen=True)
class QuailResults:
    """Derived figures for one set of inputs."""

    females: float
    eggs_week: float
    eggs_month: float
    egg_rev_month: float
    fertile_cycle: float
    chicks_cycle: float
    chick_rev_cycle: float
    feed_kg_per_cycle: float
    feed_cost_cycle: float
    other_cost_cycle: float
    net_egg_cycle: float
    net_chick_cycle: float


# =============================================================================
# CALCULATIONS
# =============================================================================

def round_half_up(value: float) -> float:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def compute(inputs: QuailInputs) -> QuailResults:
    """
    Calculate egg and chick economics for one production cycle.

    Egg profit is scaled from monthly revenue to the cycle length; chick
    profit is the revenue of one hatch. Both carry the full feed and other
    costs of the cycle.
    """
    females = round_half_up(inputs.birds * inputs.pct_female / 100)
    eggs_week = females * inputs.eggs_per_hen_week
    eggs_month = eggs_week * WEEKS_PER_MONTH
    egg_rev_month = eggs_month * inputs.egg_price

    fertile_cycle = eggs_week * inputs.cycle_weeks * (inputs.fertility / 100)
    chicks_cycle = round_half_up(fertile_cycle * (inputs.hatch_rate / 100))
    chick_rev_cycle = chicks_cycle * inputs.chick_price

    feed_kg_per_day = inputs.feed_gram_per_bird * inputs.birds / 1000
    feed_kg_per_cycle = feed_kg_per_day * inputs.cycle_weeks * 7
    feed_cost_cycle = feed_kg_per_cycle * inputs.feed_price_kg

    other_cost_cycle = inputs.other_costs_month * inputs.cycle_weeks / WEEKS_PER_MONTH

    net_egg_cycle = (
        egg_rev_month * (inputs.cycle_weeks / WEEKS_PER_MONTH)
        - feed_cost_cycle
        - other_cost_cycle
    )
    net_chick_cycle = chick_rev_cycle - feed_cost_cycle - other_cost_cycle

    logger.debug(
        "compute: females=%s chicks=%s net_egg=%.2f net_chick=%.2f",
        females, chicks_cycle, net_egg_cycle, net_chick_cycle,
    )

    return QuailResults(
        females=females,
        eggs_week=eggs_week,
        eggs_month=eggs_month,
        egg_rev_month=egg_rev_month,
        fertile_cycle=fertile_cycle,
        chicks_cycle=chicks_cycle,
        chick_rev_cycle=chick_rev_cycle,
        feed_kg_per_cycle=feed_kg_per_cycle,
        feed_cost_cycle=feed_cost_cycle,
        other_cost_cycle=other_cost_cycle,
        net_egg_cycle=net_egg_cycle,
        net_chick_cycle=net_chick_cycle,
    )


def has_non_finite(results: QuailResults) -> bool:
    """True when any derived figure is NaN or infinite."""
    return not bool(np.isfinite(np.array(astuple(results), dtype=float)).all())


# =============================================================================
# SNAPSHOT & FORMATTING
# =============================================================================

def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def snapshot(inputs: QuailInputs, results: QuailResults) -> Dict:
    """
    Inputs and results as one record with camelCase keys.

    All eleven inputs are included, `birds` as well.
    """
    return {
        "inputs": {_camel(k): v for k, v in asdict(inputs).items()},
        "results": {_camel(k): v for k, v in asdict(results).items()},
    }


def snapshot_json(inputs: QuailInputs, results: QuailResults) -> str:
    """Snapshot serialized for the clipboard / download."""
    return json.dumps(snapshot(inputs, results), indent=2)


def format_count(amount: float) -> str:
    """Format a quantity with thousands separators, e.g. 2,176."""
    rounded = round_half_up(amount)
    if not math.isfinite(rounded):
        return str(rounded)
    return f"{rounded:,}"


def format_currency(amount: float) -> str:
    """Format number as kwacha, e.g. MK 3,141,373."""
    return f"{CURRENCY} {format_count(amount)}"
