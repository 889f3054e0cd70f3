"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` and the ``get_cursor`` context
manager used by the record stores, and ``init_db`` which applies
pending migrations on application start.  Applied versions are kept in
the ``migrations`` table and new migrations run in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


logger = logging.getLogger(__name__)


# Each entry is (version, script).  Append new migrations with an
# incremented version number; never edit an applied one.
MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            phone TEXT,
            birth_date TEXT,
            active INTEGER NOT NULL DEFAULT 1,
            creation_date TEXT NOT NULL
        );

        -- No foreign key on user_id: deleting an account leaves its workouts.
        CREATE TABLE IF NOT EXISTS workouts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            description TEXT,
            workout_date TEXT NOT NULL,
            duration_minutes INTEGER NOT NULL DEFAULT 0,
            total_hp_earned INTEGER NOT NULL DEFAULT 0
        );

        CREATE INDEX IF NOT EXISTS idx_workouts_user_id ON workouts(user_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths in ``settings.database_url`` are used as is; relative
    ones are resolved against the ``gymchain_api`` package directory.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # gymchain_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection with name‑keyed rows."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Create the ``migrations`` table if needed and apply pending migrations."""
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
