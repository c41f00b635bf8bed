"""Unit conversion between pounds (storage) and kilograms (display).

Weights are always stored in pounds. Conversion to kilograms happens at
display time and user input entered in kilograms is converted back to
pounds before it is saved. Displayed weights are rounded to one decimal
place; stored values keep full precision.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from lift_tracker.config import LBS_TO_KG_FACTOR, STEP_SIZES, UNITS


class InvalidWeightError(ValueError):
    """Raised for a max weight that is not a finite number above zero."""


class InvalidLiftNameError(ValueError):
    """Raised for an empty lift name."""


def _check_unit(unit: str) -> str:
    if unit not in UNITS:
        raise ValueError(f"Unknown unit {unit!r}. Choose from: {', '.join(UNITS)}")
    return unit


def to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * LBS_TO_KG_FACTOR


def to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / LBS_TO_KG_FACTOR


def to_display_unit(weight_lbs: float, unit: str) -> float:
    """Convert a stored weight (lbs) to the display unit, unrounded."""
    if _check_unit(unit) == "kg":
        return to_kg(weight_lbs)
    return weight_lbs


def from_display_unit(weight: float, unit: str) -> float:
    """Convert a weight in the display unit back to pounds."""
    if _check_unit(unit) == "kg":
        return to_lbs(weight)
    return weight


def format_weight(weight_lbs: float, unit: str, with_label: bool = True) -> str:
    """Format a stored weight for display, e.g. ``"225.0 lbs"``."""
    text = f"{to_display_unit(weight_lbs, unit):.1f}"
    if with_label:
        return f"{text} {unit}"
    return text


def _round_half_up(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percent_of_max(set_weight: float, max_weight: float) -> int:
    """Percentage of max a set represents, rounded to a whole number.

    Always computed from the current weights so it stays correct after
    the max weight is edited.
    """
    return _round_half_up(set_weight / max_weight * 100)


def step_sizes(unit: str) -> tuple:
    """Return the (small, large) edit step for a unit: 5/10 lbs or 2.5/5 kg."""
    return STEP_SIZES[_check_unit(unit)]


def increment_weight(weight: float, amount: float) -> float:
    return weight + amount


def decrement_weight(weight: float, amount: float) -> float:
    """Subtract ``amount``, never going below zero."""
    return max(0.0, weight - amount)


def parse_weight_input(raw: str, unit: str = "lbs") -> float:
    """Convert a user-entered weight string in ``unit`` to pounds.

    Input that is not a number yields 0.0, which ``validate_max_weight``
    rejects.
    """
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return from_display_unit(value, unit)


def validate_max_weight(value) -> float:
    """Return ``value`` as a float if it is a usable max weight."""
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise InvalidWeightError(f"Max weight must be a number, got {value!r}")
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeightError("Please enter a valid max weight greater than zero.")
    return weight


def validate_lift_name(name) -> str:
    """Return the stripped lift name, rejecting blank names."""
    if name is None or not str(name).strip():
        raise InvalidLiftNameError("Please enter a valid lift name.")
    return str(name).strip()
