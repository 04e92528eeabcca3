"""
SQLite database integration for the store-backed organization listing.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  The store holds a single ``organizations`` table whose
``fund_amount`` column is numeric, so sorting is done by the database
itself.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import resolve_path, settings

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """Compute the path to the SQLite database file from settings."""
    return str(resolve_path(settings.database_url))


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
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
    current schema version, and applies any new migrations defined in
    the ``migrations`` list.  If you add a new migration, append it
    with an incremented version number.
    """
    migrations: list[tuple[int, str]] = [
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS organizations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                org_name TEXT NOT NULL,
                fund_amount REAL NOT NULL DEFAULT 0
            );

            CREATE INDEX IF NOT EXISTS idx_organizations_fund_amount
                ON organizations (fund_amount);
            """,
        ),
    ]

    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY, applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current = row["version"] or 0
        for version, script in migrations:
            if version <= current:
                continue
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            logger.info("Applied database migration %s", version)
