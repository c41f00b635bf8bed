"""Command-line interface for the lift tracking application."""

import argparse
import logging
import sys

from lift_tracker.config import (
    DEFAULT_SELECTED_CYCLE,
    LOG_LEVEL,
    STORAGE_BACKEND,
    TRAINING_CYCLES,
    WORKING_SET_TABLES,
)
from lift_tracker.lift_service import add_lift, delete_lift, fetch_lifts, get_lift, update_lift
from lift_tracker.lift_store import get_store
from lift_tracker.logging_config import setup_logging
from lift_tracker.models import Lift
from lift_tracker.unit_converter import (
    InvalidLiftNameError,
    InvalidWeightError,
    decrement_weight,
    format_weight,
    from_display_unit,
    increment_weight,
    parse_weight_input,
    step_sizes,
    to_display_unit,
)
from lift_tracker.weight_calculator import calculate_training_weights, format_prescription


def _unit(args) -> str:
    return "kg" if args.kg else "lbs"


def _get_lift_or_exit(args):
    tracking_lift = get_lift(args.lift_id, args.store)
    if not tracking_lift:
        print(f"Lift {args.lift_id} not found.")
        sys.exit(1)
    return tracking_lift


# --- Command handlers ---

def cmd_lifts_list(args):
    unit = _unit(args)
    lifts = fetch_lifts(args.store)
    if not lifts:
        print("No lifts added yet. Add one with:")
        print("  python -m lift_tracker lifts add --name Squat --weight 225")
        return

    print(f"{'ID':>4}  {'Name':<25}  {'Max':>12}  {'Added'}")
    print("-" * 60)
    for t in lifts:
        print(f"{t.id:>4}  {t.lift.name:<25}  {format_weight(t.lift.max_weight, unit):>12}  {t.date}")


def cmd_lifts_add(args):
    unit = _unit(args)
    max_weight = parse_weight_input(args.weight, unit)
    try:
        tracking_lift = add_lift(Lift(args.name, max_weight), args.store)
    except (InvalidLiftNameError, InvalidWeightError) as e:
        print(f"Validation error: {e}")
        sys.exit(1)

    print(f"Added {tracking_lift.lift.name} "
          f"({format_weight(tracking_lift.lift.max_weight, unit)}) [#{tracking_lift.id}]")


def cmd_lifts_edit(args):
    unit = _unit(args)
    tracking_lift = _get_lift_or_exit(args)

    if args.weight is not None:
        new_max = parse_weight_input(args.weight, unit)
    else:
        current = to_display_unit(tracking_lift.lift.max_weight, unit)
        if args.step >= 0:
            stepped = increment_weight(current, args.step)
        else:
            stepped = decrement_weight(current, -args.step)
        new_max = from_display_unit(stepped, unit)

    try:
        updated = update_lift(tracking_lift.id, new_max, args.store)
    except InvalidWeightError as e:
        print(f"Invalid weight: {e}")
        sys.exit(1)

    if not updated:
        print(f"Failed to update lift. No lift found with ID {tracking_lift.id}.")
        sys.exit(1)
    print(f"{tracking_lift.lift.name}: {format_weight(tracking_lift.lift.max_weight, unit)}"
          f" -> {format_weight(new_max, unit)}")


def cmd_lifts_delete(args):
    if delete_lift(args.lift_id, args.store):
        print(f"Deleted lift {args.lift_id}.")
    else:
        print(f"Lift {args.lift_id} not found.")
        sys.exit(1)


def cmd_plan(args):
    tracking_lift = _get_lift_or_exit(args)
    prescription = calculate_training_weights(tracking_lift.lift.max_weight, args.cycle)
    print(f"{tracking_lift.lift.name}")
    print("=" * 40)
    print(format_prescription(prescription, _unit(args)))


def cmd_cycles(args):
    for cycle in TRAINING_CYCLES:
        sets = ", ".join(f"{pct}%x{reps}" for pct, reps in WORKING_SET_TABLES[cycle])
        warm_up = "no warm-up" if cycle == "Deload" else "warm-up 40/50/60%"
        print(f"  {cycle:<7} {sets}  ({warm_up})")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lift_tracker",
        description="531 Strength Tracker - warm-up and working set calculator",
    )
    parser.add_argument("--backend", choices=["sqlite", "memory"], default=STORAGE_BACKEND,
                        help="Storage backend (default: %(default)s)")
    parser.add_argument("--db", help="SQLite database path")
    parser.add_argument("--kg", action="store_true",
                        help="Enter and display weights in kilograms instead of pounds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- lifts ---
    lifts_parser = subparsers.add_parser("lifts", help="Manage tracked lifts")
    lifts_sub = lifts_parser.add_subparsers(dest="subcommand")

    list_p = lifts_sub.add_parser("list", help="List all lifts")
    list_p.set_defaults(func=cmd_lifts_list)

    add_p = lifts_sub.add_parser("add", help="Add a lift")
    add_p.add_argument("--name", required=True, help="Lift name (e.g. Squat)")
    add_p.add_argument("--weight", required=True, help="Max weight in the display unit")
    add_p.set_defaults(func=cmd_lifts_add)

    edit_p = lifts_sub.add_parser("edit", help="Change a lift's max weight")
    edit_p.add_argument("lift_id", type=int, help="Lift ID")
    edit_group = edit_p.add_mutually_exclusive_group(required=True)
    edit_group.add_argument("--weight", help="New max weight in the display unit")
    edit_group.add_argument("--step", type=float,
                            help="Add (or with a minus sign, subtract) this amount. "
                                 f"Usual steps: {step_sizes('lbs')} lbs, {step_sizes('kg')} kg")
    edit_p.set_defaults(func=cmd_lifts_edit)

    delete_p = lifts_sub.add_parser("delete", help="Delete a lift")
    delete_p.add_argument("lift_id", type=int, help="Lift ID")
    delete_p.set_defaults(func=cmd_lifts_delete)

    # --- plan ---
    plan_p = subparsers.add_parser("plan", help="Show warm-up and working sets for a lift")
    plan_p.add_argument("lift_id", type=int, help="Lift ID")
    plan_p.add_argument("--cycle", default=DEFAULT_SELECTED_CYCLE, choices=TRAINING_CYCLES,
                        help="Training cycle (default: %(default)s)")
    plan_p.set_defaults(func=cmd_plan)

    # --- cycles ---
    cycles_p = subparsers.add_parser("cycles", help="List training cycles")
    cycles_p.set_defaults(func=cmd_cycles)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else LOG_LEVEL)
    logging.getLogger(__name__).debug("Using %s storage", args.backend)

    if not args.command:
        parser.print_help()
        return

    # argparse doesn't check a default from the environment against choices
    try:
        args.store = get_store(args.backend, args.db)
    except ValueError as e:
        print(e)
        sys.exit(1)
    args.store.init()

    if hasattr(args, "func"):
        args.func(args)
    else:
        # Subcommand not specified
        sub = parser._subparsers._group_actions[0].choices[args.command]
        sub.print_help()
