"""Database schema definitions for the local key-value store."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS record(
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the key-value record table if it does not exist.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
