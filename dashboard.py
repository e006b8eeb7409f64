#!/usr/bin/env python3
"""
Quail Business Dashboard
========================
Eggs vs hatchlings calculator with a sensitivity quick view.
Tweak the inputs to see profit per cycle change instantly.

Run with: python3 -m streamlit run dashboard.py
"""

import logging

import streamlit as st

from charts import SENSITIVITY_CHARTS, sensitivity_figure
from quail_model import (
    DEFAULT_INPUTS,
    QuailInputs,
    compute,
    format_count,
    format_currency,
    has_non_finite,
    snapshot_json,
)
from sensitivity import CSV_FILENAME, sweep, to_csv

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="Quail Business Calculator",
    page_icon="🥚",
    layout="wide",
    initial_sidebar_state="collapsed"
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Form rows in display order: (input field, label)
FORM_ROWS = [
    [("birds", "Number of birds"),
     ("pct_female", "% Female"),
     ("eggs_per_hen_week", "Eggs / hen / week")],
    [("egg_price", "Egg price (MK)"),
     ("chick_price", "Chick sell price (MK)"),
     ("cycle_weeks", "Cycle duration (weeks)")],
    [("fertility", "Fertility %"),
     ("hatch_rate", "Hatch rate %"),
     ("feed_gram_per_bird", "Feed (g/bird/day)")],
    [("feed_price_kg", "Feed price (MK/kg)"),
     ("other_costs_month", "Other costs (MK / month)")],
]

if "show_sensitivity" not in st.session_state:
    st.session_state.show_sensitivity = True

main_col, side_col = st.columns([2, 1])

# =============================================================================
# INPUTS
# =============================================================================

with main_col:
    st.title("Quail Business — Eggs vs Hatchlings")
    st.caption("Interactive calculator with sensitivity analysis. "
               "Tweak inputs to see instant profit changes.")

    values = {}
    for row in FORM_ROWS:
        cols = st.columns(3)
        for col, (field, label) in zip(cols, row):
            with col:
                values[field] = st.number_input(
                    label,
                    value=float(DEFAULT_INPUTS[field]),
                    step=1.0,
                    key=field
                )

inputs = QuailInputs(**values)
results = compute(inputs)
sensitivity = sweep(results, inputs.chick_price, inputs.cycle_weeks)

logger.info(
    "Recomputed: net egg profit %s, net chick profit %s per cycle",
    format_currency(results.net_egg_cycle),
    format_currency(results.net_chick_cycle),
)

# =============================================================================
# RESULTS
# =============================================================================

with main_col:
    st.markdown("---")

    if has_non_finite(results):
        logger.warning("Non-finite results for inputs %s", inputs)
        st.warning("⚠️ Some results are not finite numbers - check the inputs.")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Eggs / week", format_count(results.eggs_week))
        st.metric("Egg revenue / month", format_currency(results.egg_rev_month))

    with col2:
        st.metric("Estimated chicks / cycle", format_count(results.chicks_cycle))
        st.metric("Chick revenue / cycle", format_currency(results.chick_rev_cycle))

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Feed cost / cycle", format_currency(results.feed_cost_cycle))

    with col2:
        st.metric("Other cost / cycle", format_currency(results.other_cost_cycle))

    st.markdown("#### Net profit per cycle")
    col1, col2 = st.columns(2)

    with col1:
        st.metric("Net profit (eggs) per cycle", format_currency(results.net_egg_cycle))

    with col2:
        st.metric("Net profit (chicks) per cycle", format_currency(results.net_chick_cycle))

# =============================================================================
# QUICK ACTIONS
# =============================================================================

with side_col:
    st.markdown("#### Quick actions")

    payload = snapshot_json(inputs, results)
    with st.expander("📋 Copy snapshot"):
        st.code(payload, language="json")
        st.download_button(
            label="📥 Download snapshot",
            data=payload,
            file_name="quail_snapshot.json",
            mime="application/json"
        )

    st.download_button(
        label="📥 Export sensitivity CSV",
        data=to_csv(sensitivity),
        file_name=CSV_FILENAME,
        mime="text/csv"
    )

    st.toggle("Show sensitivity", key="show_sensitivity")

# =============================================================================
# SENSITIVITY
# =============================================================================

with side_col:
    st.markdown("---")
    st.markdown("#### Sensitivity (quick view)")
    st.caption("Change hatch rate, egg price or feed price to see profit sensitivity.")

    if st.session_state.show_sensitivity:
        for attr, title, color in SENSITIVITY_CHARTS:
            fig = sensitivity_figure(getattr(sensitivity, attr), title, color)
            st.plotly_chart(fig, use_container_width=True)
