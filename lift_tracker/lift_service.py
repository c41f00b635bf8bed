"""Lift management on top of a storage backend.

Validates input, stamps new lifts with today's date and logs the outcome
of every change. Storage errors are logged and re-raised; nothing is
retried.
"""

import logging
from typing import Optional

from lift_tracker.lift_store import LiftStore
from lift_tracker.models import Lift, TrackingLift, today_label
from lift_tracker.unit_converter import validate_lift_name, validate_max_weight

logger = logging.getLogger(__name__)


def add_lift(lift: Lift, store: LiftStore) -> TrackingLift:
    """Save a new lift. Returns the TrackingLift with its assigned ID."""
    name = validate_lift_name(lift.name)
    max_weight = validate_max_weight(lift.max_weight)
    tracking_lift = TrackingLift(lift=Lift(name, max_weight), date=today_label())

    try:
        tracking_lift.id = store.create(name, max_weight, tracking_lift.date)
    except Exception as e:
        logger.error("Error adding lift %r: %s", name, e)
        raise

    logger.info("Added lift %r (ID %s) at %s lbs", name, tracking_lift.id, max_weight)
    return tracking_lift


def fetch_lifts(store: LiftStore) -> list:
    """Load all tracked lifts."""
    try:
        lifts = store.list_all()
    except Exception as e:
        logger.error("Error fetching lifts: %s", e)
        raise
    logger.debug("Fetched %d lifts", len(lifts))
    return lifts


def get_lift(lift_id: int, store: LiftStore) -> Optional[TrackingLift]:
    """Load a single lift by ID, or None."""
    return store.get(lift_id)


def update_lift(lift_id: int, new_max_weight: float, store: LiftStore) -> bool:
    """Overwrite a lift's max weight (lbs). Returns False if the ID is unknown."""
    new_max_weight = validate_max_weight(new_max_weight)
    try:
        updated = store.update_max_weight(lift_id, new_max_weight)
    except Exception as e:
        logger.error("Error updating lift %s: %s", lift_id, e)
        raise

    if updated:
        logger.info("Lift %s updated to %s lbs", lift_id, new_max_weight)
    else:
        logger.warning("Lift %s not found, nothing updated", lift_id)
    return updated


def delete_lift(lift_id: int, store: LiftStore) -> bool:
    """Delete a lift. Returns False if the ID is unknown."""
    try:
        deleted = store.delete_by_id(lift_id)
    except Exception as e:
        logger.error("Error deleting lift %s: %s", lift_id, e)
        raise

    if deleted:
        logger.info("Lift %s deleted", lift_id)
    else:
        logger.warning("Lift %s not found, nothing deleted", lift_id)
    return deleted
