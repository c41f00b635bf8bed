"""Training weight calculation for 5/3/1-style programming.

Every prescribed weight is a fixed percentage of the lift's max:

    weight = max_weight × percentage / 100

Working sets come from the selected cycle's table (Deload, 5/5/5, 3/3/3,
5/3/1). A warm-up of 40/50/60 percent for 5/5/3 reps precedes the working
sets in every cycle except Deload, whose working sets already use those
same light percentages.

No rounding is applied here; rounding to one decimal place happens when a
weight is formatted for display.
"""

import logging

from lift_tracker.config import (
    FALLBACK_CYCLE,
    WARM_UP_TABLE,
    WORKING_SET_TABLES,
)
from lift_tracker.models import Prescription, SetRow, WarmUp, WorkSet
from lift_tracker.unit_converter import format_weight, percent_of_max

logger = logging.getLogger(__name__)


def calculate_weight(max_weight: float, percentage: float) -> float:
    """Weight for a percentage of max."""
    return max_weight * (percentage / 100)


def working_set_table(cycle: str) -> list:
    """Return the (percentage, reps) table for a cycle.

    Unrecognized cycles use the 5/3/1 table.
    """
    table = WORKING_SET_TABLES.get(cycle)
    if table is None:
        logger.warning("Unknown training cycle %r, using %s", cycle, FALLBACK_CYCLE)
        table = WORKING_SET_TABLES[FALLBACK_CYCLE]
    return table


def calculate_warm_up(max_weight: float) -> WarmUp:
    """Warm-up weights at 40/50/60 percent of max."""
    (p1, r1), (p2, r2), (p3, r3) = WARM_UP_TABLE
    return WarmUp(
        weight40=calculate_weight(max_weight, p1),
        weight50=calculate_weight(max_weight, p2),
        weight60=calculate_weight(max_weight, p3),
        reps40=r1,
        reps50=r2,
        reps60=r3,
    )


def calculate_training_weights(max_weight: float, cycle: str) -> Prescription:
    """Calculate warm-up and working sets for a max weight and cycle.

    Callers validate ``max_weight`` before calling; see
    ``unit_converter.validate_max_weight``.
    """
    (p1, r1), (p2, r2), (p3, r3) = working_set_table(cycle)
    working_sets = WorkSet(
        rep_lift1=calculate_weight(max_weight, p1),
        rep_lift2=calculate_weight(max_weight, p2),
        rep_lift3=calculate_weight(max_weight, p3),
        reps1=r1,
        reps2=r2,
        reps3=r3,
    )

    warm_up = None if cycle == "Deload" else calculate_warm_up(max_weight)

    return Prescription(
        max_weight=max_weight,
        cycle=cycle,
        working_sets=working_sets,
        warm_up=warm_up,
    )


def working_set_rows(prescription: Prescription) -> list:
    """Working sets as display rows, percentage recomputed from the weights."""
    ws = prescription.working_sets
    return [
        SetRow(percent_of_max(weight, prescription.max_weight), weight, reps)
        for weight, reps in zip(ws.weights, ws.reps)
    ]


def warm_up_rows(prescription: Prescription) -> list:
    """Warm-up display rows, empty for Deload."""
    if prescription.warm_up is None:
        return []
    return prescription.warm_up.rows()


def _format_rows(rows: list, unit: str) -> list:
    lines = [f"  {'%':>4}  {'Weight':>12}  {'Reps':>4}"]
    for row in rows:
        lines.append(
            f"  {str(row.percentage) + '%':>4}  {format_weight(row.weight, unit):>12}  {row.reps:>4}"
        )
    return lines


def format_prescription(prescription: Prescription, unit: str = "lbs") -> str:
    """Format a prescription for display."""
    lines = [
        f"Cycle: {prescription.cycle}",
        f"Max:   {format_weight(prescription.max_weight, unit)}",
    ]

    if prescription.has_warm_up:
        lines.append("\nWarm-up:")
        lines.extend(_format_rows(warm_up_rows(prescription), unit))

    lines.append("\nWorking Sets:")
    lines.extend(_format_rows(working_set_rows(prescription), unit))
    return "\n".join(lines)
