#!/usr/bin/env python3
"""
Quail Profit Sensitivity
========================
How net profit per cycle moves with hatch rate, egg price and feed price.

Each sweep swaps one value into its own sub-formula and keeps every other
derived figure at its current value. The point that matches the current
input therefore reproduces the headline profit.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd

from quail_model import WEEKS_PER_MONTH, QuailResults, round_half_up

logger = logging.getLogger(__name__)

# =============================================================================
# SWEEP RANGES
# =============================================================================

HATCH_RATE_RANGE = [50 + i * 5 for i in range(9)]  # 50%..90%
EGG_PRICE_RANGE = [50 + i * 25 for i in range(9)]  # MK50..MK250
FEED_PRICE_RANGE = [400 + i * 80 for i in range(9)]  # MK400..MK1,040

CSV_FILENAME = "quail_sensitivity.csv"
CSV_COLUMNS = ["type", "variable", "value"]


@dataclass(frozen=True)
class SensitivityPoint:
    label: str
    value: float


@dataclass(frozen=True)
class SensitivityResult:
    by_hatch: Tuple[SensitivityPoint, ...]
    by_egg_price: Tuple[SensitivityPoint, ...]
    by_feed_price: Tuple[SensitivityPoint, ...]


# =============================================================================
# SWEEPS
# =============================================================================

def sweep_hatch_rate(results: QuailResults, chick_price: float) -> Tuple[SensitivityPoint, ...]:
    """Net chick profit per cycle across hatch rates."""
    points = []
    for hr in HATCH_RATE_RANGE:
        chicks_cycle = round_half_up(results.fertile_cycle * (hr / 100))
        net_chick = chicks_cycle * chick_price - results.feed_cost_cycle - results.other_cost_cycle
        points.append(SensitivityPoint(f"{hr}%", round_half_up(net_chick)))
    return tuple(points)


def sweep_egg_price(results: QuailResults, cycle_weeks: float) -> Tuple[SensitivityPoint, ...]:
    """Net egg profit per cycle across egg prices."""
    points = []
    for ep in EGG_PRICE_RANGE:
        egg_rev_month = results.eggs_month * ep
        net_egg = (
            egg_rev_month * (cycle_weeks / WEEKS_PER_MONTH)
            - results.feed_cost_cycle
            - results.other_cost_cycle
        )
        points.append(SensitivityPoint(f"{ep}", round_half_up(net_egg)))
    return tuple(points)


def sweep_feed_price(results: QuailResults) -> Tuple[SensitivityPoint, ...]:
    """Net chick profit per cycle across feed prices (MK/kg)."""
    points = []
    for fp in FEED_PRICE_RANGE:
        feed_cost_cycle = results.feed_kg_per_cycle * fp
        net_chick = results.chick_rev_cycle - feed_cost_cycle - results.other_cost_cycle
        points.append(SensitivityPoint(f"{fp}", round_half_up(net_chick)))
    return tuple(points)


def sweep(results: QuailResults, chick_price: float, cycle_weeks: float) -> SensitivityResult:
    """Run all three sweeps for the current results."""
    sensitivity = SensitivityResult(
        by_hatch=sweep_hatch_rate(results, chick_price),
        by_egg_price=sweep_egg_price(results, cycle_weeks),
        by_feed_price=sweep_feed_price(results),
    )
    logger.debug(
        "sweep: hatch %s..%s, egg price %s..%s, feed price %s..%s",
        sensitivity.by_hatch[0].value, sensitivity.by_hatch[-1].value,
        sensitivity.by_egg_price[0].value, sensitivity.by_egg_price[-1].value,
        sensitivity.by_feed_price[0].value, sensitivity.by_feed_price[-1].value,
    )
    return sensitivity


# =============================================================================
# EXPORT
# =============================================================================

def to_rows(sensitivity: SensitivityResult) -> List[List]:
    """Flatten the three sweeps into [type, variable, value] rows."""
    groups = [
        ("hatchRate", sensitivity.by_hatch),
        ("eggPrice", sensitivity.by_egg_price),
        ("feedPrice", sensitivity.by_feed_price),
    ]
    return [[kind, p.label, p.value] for kind, points in groups for p in points]


def to_dataframe(sensitivity: SensitivityResult) -> pd.DataFrame:
    """Long-format table: one row per sweep point."""
    # object dtype keeps whole numbers as ints when a NaN shows up
    return pd.DataFrame(to_rows(sensitivity), columns=CSV_COLUMNS, dtype=object)


def to_csv(sensitivity: SensitivityResult) -> str:
    """
    CSV text for download: header plus 27 rows, newline separated.

    Non-finite values are written as text (NaN, inf, -inf).
    """
    csv = to_dataframe(sensitivity).to_csv(index=False, lineterminator="\n", na_rep="NaN")
    return csv.rstrip("\n")
