"""Database setup and connection handling using SQLite."""

import os
import sqlite3
from contextlib import contextmanager

from lift_tracker.config import DB_PATH

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS lifts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    max_weight REAL NOT NULL,
    date TEXT NOT NULL
);
"""


def init_db(db_path: str = DB_PATH) -> None:
    """Initialize the database, creating tables if they don't exist."""
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    with get_connection(db_path) as conn:
        conn.executescript(SCHEMA_SQL)


@contextmanager
def get_connection(db_path: str = DB_PATH):
    """Context manager for database connections."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
