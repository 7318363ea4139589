"""Durable storage for the watchlist as one named record."""

import logging
import pathlib
import sqlite3
from typing import List, Sequence, Union

from ingredient_inspector.database import (
    get_connection,
    read_record,
    transaction,
    write_record,
)
from ingredient_inspector.exceptions import WatchlistError, WatchlistStorageError
from ingredient_inspector.watchlist.codec import decode_watchlist, encode_watchlist

logger = logging.getLogger(__name__)

WATCHLIST_STORAGE_KEY = "my-watchlist"


class WatchlistStore:
    """Loads and saves the whole watchlist under a single record key.

    Both operations work on the complete list; there is no incremental
    update. ``load`` never raises and ``save`` reports failure through its
    return value. ``fetch`` is the strict variant of ``load`` for callers
    that need to tell "empty" apart from "unreadable".

    Attributes:
        db_path: Path to the SQLite database holding the record
        key: Record name the JSON document is stored under
    """

    def __init__(
        self,
        db_path: Union[str, pathlib.Path],
        key: str = WATCHLIST_STORAGE_KEY,
    ):
        self.db_path = db_path
        self.key = key

    def fetch(self) -> List[str]:
        """Read the stored watchlist, raising if it cannot be read.

        Returns:
            The stored entries; an empty list if no record exists yet

        Raises:
            WatchlistStorageError: If the database cannot be opened or queried
            WatchlistDecodeError: If the stored document is corrupt
        """
        conn = None
        try:
            conn = get_connection(self.db_path)
            document = read_record(conn.cursor(), self.key)
        except (sqlite3.Error, OSError) as e:
            raise WatchlistStorageError(
                f"Failed to read watchlist from {self.db_path}: {e}"
            ) from e
        finally:
            if conn:
                conn.close()

        if document is None:
            return []
        return decode_watchlist(document)

    def load(self) -> List[str]:
        """Read the stored watchlist, treating any failure as an empty list."""
        try:
            return self.fetch()
        except WatchlistError as e:
            logger.warning(f"Ignoring unreadable watchlist record '{self.key}': {e}")
            return []

    def save(self, entries: Sequence[str]) -> bool:
        """Overwrite the stored watchlist with ``entries``.

        Args:
            entries: Complete watchlist in display order

        Returns:
            True if the record was written, False otherwise
        """
        document = encode_watchlist(entries)
        conn = None
        try:
            conn = get_connection(self.db_path)
            with transaction(conn) as cur:
                write_record(cur, self.key, document)
        except (sqlite3.Error, OSError) as e:
            logger.error(f"Failed to save watchlist to {self.db_path}: {e}")
            return False
        finally:
            if conn:
                conn.close()

        logger.debug(f"Saved {len(entries)} watchlist entries")
        return True
