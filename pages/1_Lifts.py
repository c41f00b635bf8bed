"""Lift Management Page.

Edit max weights with unit-aware step buttons and delete lifts.
"""

import streamlit as st

from lift_tracker.lift_service import delete_lift, fetch_lifts, update_lift
from lift_tracker.unit_converter import (
    InvalidWeightError,
    decrement_weight,
    format_weight,
    increment_weight,
    parse_weight_input,
    step_sizes,
)
from pages.components.charts import create_max_weight_chart
from pages.components.session import current_unit, flash, init_session_state, show_flash

st.set_page_config(page_title="Lifts | 531 Strength Tracker", page_icon="🏋️", layout="wide")
st.title("🏋️ Lifts")

init_session_state()
store = st.session_state.store
show_flash()
with st.sidebar:
    st.toggle("Show weights in KG", key="is_kg")
unit = current_unit()

lifts = fetch_lifts(store)
if not lifts:
    st.info("No lifts added yet. Add one on the main page.")
    st.stop()

fig = create_max_weight_chart(lifts, unit)
st.plotly_chart(fig, use_container_width=True)

st.markdown("### Edit Lift")

options = {t.id: t for t in lifts}
lift_id = st.selectbox(
    "Lift",
    list(options.keys()),
    format_func=lambda i: f"{options[i].lift.name} ({format_weight(options[i].lift.max_weight, unit)})",
)
tracking_lift = options[lift_id]

# The text field holds the weight in the display unit; reset it when the
# lift or the unit changes.
field_key = f"edit_weight_{lift_id}_{unit}"
if field_key not in st.session_state:
    st.session_state[field_key] = format_weight(tracking_lift.lift.max_weight, unit, with_label=False)


def _step(amount: float):
    # Parsed as-is: the field and the step are both in the display unit
    current = parse_weight_input(st.session_state[field_key], "lbs")
    if amount >= 0:
        new_value = increment_weight(current, amount)
    else:
        new_value = decrement_weight(current, -amount)
    st.session_state[field_key] = f"{new_value:.1f}"


st.text_input(f"Max Weight ({unit.upper()})", key=field_key)

small, large = step_sizes(unit)
cols = st.columns(4)
cols[0].button(f"-{large:g}", on_click=_step, args=(-large,), use_container_width=True)
cols[1].button(f"-{small:g}", on_click=_step, args=(-small,), use_container_width=True)
cols[2].button(f"+{small:g}", on_click=_step, args=(small,), use_container_width=True)
cols[3].button(f"+{large:g}", on_click=_step, args=(large,), use_container_width=True)

changed = False
save_col, delete_col = st.columns(2)
with save_col:
    if st.button("💾 Save Changes", use_container_width=True):
        new_max_lbs = parse_weight_input(st.session_state[field_key], unit)
        try:
            if update_lift(lift_id, new_max_lbs, store):
                del st.session_state[field_key]
                flash("✅ Lift updated successfully!")
                changed = True
            else:
                st.error("❌ Failed to update lift. No lift found with this ID.")
        except InvalidWeightError as e:
            st.error(f"⚠️ Invalid Weight: {e}")
        except Exception as e:
            st.error(f"❌ Failed to save lift: {e}")

with delete_col:
    if st.button("🗑️ Delete Lift", use_container_width=True):
        try:
            if delete_lift(lift_id, store):
                st.session_state.current_lift_index = 0
                flash(f"✅ {tracking_lift.lift.name} deleted.")
                changed = True
            else:
                st.error("❌ No lift found with this ID.")
        except Exception as e:
            st.error(f"❌ Failed to delete lift: {e}")

if changed:
    # Reload with the new weights
    st.rerun()

st.markdown("---")
st.caption("💡 **Tip:** Weights are stored in pounds. Edits in KG are converted before saving.")
