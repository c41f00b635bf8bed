"""Chart components using Plotly for data visualization."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from lift_tracker.models import Prescription
from lift_tracker.unit_converter import to_display_unit
from lift_tracker.weight_calculator import warm_up_rows, working_set_rows


def create_prescription_bar_chart(prescription: Prescription, unit: str):
    """Create bar chart of every set's weight, warm-up first.

    Args:
        prescription: Prescription to plot
        unit: Display unit, "lbs" or "kg"

    Returns:
        Plotly figure
    """
    records = []
    for i, row in enumerate(warm_up_rows(prescription), 1):
        records.append(("Warm-up", f"W{i}", row.percentage, row.reps, row.weight))
    for i, row in enumerate(working_set_rows(prescription), 1):
        records.append(("Working", f"Set {i}", row.percentage, row.reps, row.weight))

    df = pd.DataFrame(records, columns=['Phase', 'Set', 'Percent', 'Reps', 'Weight'])
    df['Weight'] = df['Weight'].apply(lambda w: round(to_display_unit(w, unit), 1))

    fig = px.bar(
        df,
        x='Set',
        y='Weight',
        color='Phase',
        text='Reps',
        hover_data=['Percent'],
        title=f"{prescription.cycle} Sets",
        color_discrete_map={'Warm-up': '#B0B0B0', 'Working': '#D32F2F'},
    )

    fig.update_traces(texttemplate='%{text} reps', textposition='outside')
    fig.update_layout(
        xaxis_title="",
        yaxis_title=f"Weight ({unit})",
        legend_title="",
    )

    fig.add_hline(
        y=round(to_display_unit(prescription.max_weight, unit), 1),
        line_dash="dash",
        annotation_text="Max",
        line_color="black",
    )

    return fig


def create_max_weight_chart(lifts: list, unit: str):
    """Create horizontal bar chart of all tracked maxes.

    Args:
        lifts: List of TrackingLift objects
        unit: Display unit

    Returns:
        Plotly figure
    """
    if not lifts:
        fig = go.Figure()
        fig.add_annotation(
            text="No lifts added yet",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    df = pd.DataFrame(
        [(t.lift.name, round(to_display_unit(t.lift.max_weight, unit), 1)) for t in lifts],
        columns=['Lift', 'Max'],
    )

    fig = px.bar(df, x='Max', y='Lift', orientation='h', title="Max Weights",
                 color_discrete_sequence=['#D32F2F'])
    fig.update_layout(xaxis_title=f"Weight ({unit})", yaxis_title="")
    return fig
