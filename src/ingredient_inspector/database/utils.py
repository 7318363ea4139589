"""Database utility functions for named records."""

import contextlib
import pathlib
import sqlite3
from typing import Generator, Optional, Union

from .schema import create_schema


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Open a SQLite database, creating its parent directory and schema.

    Args:
        db_path: Path to the SQLite database file, or ":memory:"

    Returns:
        SQLite connection with the record table in place
    """
    if str(db_path) != ":memory:":
        pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    create_schema(conn)
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            write_record(cur, "my-watchlist", '["Palm Oil"]')
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def read_record(cur: sqlite3.Cursor, key: str) -> Optional[str]:
    """Return the stored value for ``key``, or None if there is none."""
    cur.execute("SELECT value FROM record WHERE key = ?", (key,))
    row = cur.fetchone()
    return row[0] if row else None


def write_record(cur: sqlite3.Cursor, key: str, value: str) -> None:
    """Insert or overwrite the value stored under ``key``.

    Args:
        cur: Database cursor
        key: Record name
        value: Whole new value; the previous one is replaced
    """
    cur.execute(
        "INSERT INTO record(key, value) VALUES (?, ?) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, "
        "updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
