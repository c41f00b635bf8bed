"""Prescription display components for Streamlit pages."""

import pandas as pd
import streamlit as st

from lift_tracker.models import Prescription
from lift_tracker.unit_converter import format_weight
from lift_tracker.weight_calculator import warm_up_rows, working_set_rows


def rows_to_dataframe(rows: list, unit: str) -> pd.DataFrame:
    """Build a %, Weight, Reps table from SetRow objects."""
    return pd.DataFrame(
        [
            {"%": f"{row.percentage}%", "Weight": format_weight(row.weight, unit), "Reps": row.reps}
            for row in rows
        ],
        columns=["%", "Weight", "Reps"],
    )


def render_prescription(prescription: Prescription, unit: str):
    """Render warm-up (skipped for Deload) and working set tables.

    Args:
        prescription: Result of calculate_training_weights
        unit: "lbs" or "kg"
    """
    if prescription.has_warm_up:
        st.markdown("#### Warm-up")
        st.dataframe(
            rows_to_dataframe(warm_up_rows(prescription), unit),
            hide_index=True,
            use_container_width=True,
        )

    st.markdown("#### Working Sets")
    st.dataframe(
        rows_to_dataframe(working_set_rows(prescription), unit),
        hide_index=True,
        use_container_width=True,
    )
