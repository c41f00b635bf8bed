"""Data models for the lift tracking application."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Lift:
    """A named exercise with its one-rep max in pounds."""
    name: str
    max_weight: float


@dataclass
class TrackingLift:
    """A stored lift record.

    ``id`` is None until the lift has been saved. ``date`` is the
    locale-formatted day the record was created; editing the max weight
    does not change it.
    """
    lift: Lift
    date: str = ""
    id: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.lift, Lift):
            raise TypeError("TrackingLift expects a Lift instance for 'lift'")
        if not self.date:
            self.date = today_label()


def today_label() -> str:
    """Today's date in the current locale's short format."""
    return date.today().strftime("%x")


@dataclass(frozen=True)
class WorkSet:
    """Three prescribed working sets, weights in pounds."""
    rep_lift1: float
    rep_lift2: float
    rep_lift3: float
    reps1: int
    reps2: int
    reps3: int

    @property
    def weights(self) -> tuple:
        return (self.rep_lift1, self.rep_lift2, self.rep_lift3)

    @property
    def reps(self) -> tuple:
        return (self.reps1, self.reps2, self.reps3)


@dataclass(frozen=True)
class WarmUp:
    """Warm-up sets at 40/50/60 percent of max, weights in pounds."""
    weight40: float
    weight50: float
    weight60: float
    reps40: int = 5
    reps50: int = 5
    reps60: int = 3

    def rows(self) -> list:
        return [
            SetRow(40, self.weight40, self.reps40),
            SetRow(50, self.weight50, self.reps50),
            SetRow(60, self.weight60, self.reps60),
        ]


@dataclass(frozen=True)
class SetRow:
    """One displayed set: percentage of max, weight (lbs) and reps."""
    percentage: int
    weight: float
    reps: int


@dataclass(frozen=True)
class Prescription:
    """Warm-up and working sets for one lift in one training cycle.

    ``warm_up`` is None for Deload, where no warm-up is shown at all.
    """
    max_weight: float
    cycle: str
    working_sets: WorkSet
    warm_up: Optional[WarmUp] = None

    @property
    def has_warm_up(self) -> bool:
        return self.warm_up is not None
