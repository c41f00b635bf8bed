"""Streamlit frontend for the 531 Strength Tracker.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from lift_tracker.config import TRAINING_CYCLES
from lift_tracker.lift_service import add_lift, fetch_lifts
from lift_tracker.models import Lift
from lift_tracker.unit_converter import (
    InvalidLiftNameError,
    InvalidWeightError,
    format_weight,
    parse_weight_input,
)
from lift_tracker.weight_calculator import calculate_training_weights
from pages.components.charts import create_prescription_bar_chart
from pages.components.prescription_display import render_prescription
from pages.components.session import current_unit, flash, init_session_state, show_flash

st.set_page_config(
    page_title="531 Strength Tracker",
    page_icon="🏋️",
    layout="wide",
    initial_sidebar_state="expanded"
)

init_session_state()
store = st.session_state.store
show_flash()

# Sidebar: unit toggle and cycle selector
with st.sidebar:
    st.markdown("## 🏋️ 531 Strength Tracker")
    st.markdown("---")
    st.toggle("Show weights in KG", key="is_kg")
    st.radio("Training Cycle", TRAINING_CYCLES, key="selected_cycle")
    st.markdown("---")
    st.markdown("- 🏋️ **Lifts** - Edit or delete lifts")

unit = current_unit()
cycle = st.session_state.selected_cycle

st.title("🏋️ 531 Strength Tracker")

try:
    lifts = fetch_lifts(store)
except Exception as e:
    st.error(f"❌ Failed to load lifts: {e}")
    st.stop()

if not lifts:
    st.info("No lifts added yet. Add one below!")
else:
    index = min(st.session_state.current_lift_index, len(lifts) - 1)

    prev_col, pick_col, next_col = st.columns([1, 4, 1])
    with prev_col:
        if st.button("◀", disabled=index == 0, use_container_width=True):
            index -= 1
    with next_col:
        if st.button("▶", disabled=index >= len(lifts) - 1, use_container_width=True):
            index += 1
    with pick_col:
        labels = [f"{t.lift.name} ({format_weight(t.lift.max_weight, unit)})" for t in lifts]
        index = st.selectbox("Lift", range(len(lifts)), index=index,
                             format_func=lambda i: labels[i])
    st.session_state.current_lift_index = index

    tracking_lift = lifts[index]
    prescription = calculate_training_weights(tracking_lift.lift.max_weight, cycle)

    st.markdown(f"### {tracking_lift.lift.name}")
    col1, col2, col3 = st.columns(3)
    col1.metric("Max", format_weight(tracking_lift.lift.max_weight, unit))
    col2.metric("Cycle", cycle)
    col3.metric("Added", tracking_lift.date)

    table_col, chart_col = st.columns([1, 1])
    with table_col:
        render_prescription(prescription, unit)
    with chart_col:
        fig = create_prescription_bar_chart(prescription, unit)
        st.plotly_chart(fig, use_container_width=True)

st.markdown("---")
st.markdown("### Add Lift")

with st.form("add_lift_form", clear_on_submit=True):
    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Lift Name*", placeholder="Squat")
    with col2:
        weight_text = st.text_input(f"Max Weight ({unit.upper()})*", placeholder="225")

    submitted = st.form_submit_button("➕ Add Lift", use_container_width=True)

    if submitted:
        new_lift = None
        try:
            new_lift = add_lift(Lift(name, parse_weight_input(weight_text, unit)), store)
        except (InvalidLiftNameError, InvalidWeightError) as e:
            st.error(f"⚠️ {e}")
        except Exception as e:
            st.error(f"❌ Failed to add lift: {e}")

        if new_lift:
            flash(f"✅ {new_lift.lift.name} added successfully!")
            # Jump to the new lift
            st.session_state.current_lift_index = len(lifts)
            st.rerun()
