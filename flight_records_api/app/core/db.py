"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  The migration mechanism stores applied migration
versions in the ``migrations`` table and executes new migrations in
order.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import resolve_path, settings


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS flight (
            flight_id INTEGER PRIMARY KEY AUTOINCREMENT,
            departure_city TEXT NOT NULL,
            arrival_city TEXT NOT NULL,
            departure_time TIMESTAMP,
            carrier TEXT
        );
        """,
    ),
    (
        2,
        """
        -- Route lookups filter on both cities
        CREATE INDEX IF NOT EXISTS idx_flight_route ON flight(departure_city, arrival_city);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    ``settings.database_url`` is read on every call so it can be changed
    at runtime; relative paths resolve against the project root.
    """
    return resolve_path(settings.database_url)


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  No type detection is enabled; timestamps come back as the
    ISO strings they were stored as.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migrations from
    ``MIGRATIONS`` with a higher version.  New migrations must be
    appended with an incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
