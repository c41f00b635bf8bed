"""Application configuration and constants."""

import os

# Database
DB_DIR = os.path.join(os.path.expanduser("~"), ".lift_tracker")
DB_PATH = os.environ.get("LIFT_TRACKER_DB", os.path.join(DB_DIR, "lift_tracker.db"))

# Storage backend: "sqlite" (on disk) or "memory" (seeded, lost on exit)
STORAGE_BACKEND = os.environ.get("LIFT_TRACKER_BACKEND", "sqlite")

LOG_LEVEL = os.environ.get("LIFT_TRACKER_LOG_LEVEL", "WARNING")

# Weights are stored in pounds
LBS_TO_KG_FACTOR = 0.453592
UNITS = ("lbs", "kg")

# Small and large step for manual weight edits, in the displayed unit
STEP_SIZES = {
    "lbs": (5, 10),
    "kg": (2.5, 5),
}

TRAINING_CYCLES = ["Deload", "5/5/5", "3/3/3", "5/3/1"]
DEFAULT_SELECTED_CYCLE = "5/5/5"
FALLBACK_CYCLE = "5/3/1"

# (percentage of max, reps)
WARM_UP_TABLE = [(40, 5), (50, 5), (60, 3)]

# Deload reuses the warm-up numbers as its working sets
WORKING_SET_TABLES = {
    "Deload": [(40, 5), (50, 5), (60, 3)],
    "5/5/5": [(65, 5), (75, 5), (85, 5)],
    "3/3/3": [(70, 3), (80, 3), (90, 3)],
    "5/3/1": [(75, 5), (85, 3), (95, 1)],
}

# Lifts the in-memory store starts with (max weight in lbs)
SEED_LIFTS = [
    ("Squat", 225),
    ("Bench Press", 185),
    ("Deadlift", 315),
]
