"""In-memory watchlist that persists itself after every change."""

import logging
from typing import List, Optional

from ingredient_inspector.exceptions import WatchlistError, WatchlistNotLoadedError
from ingredient_inspector.watchlist.store import WatchlistStore

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load the watchlist."
SAVE_FAILED_MESSAGE = "Failed to save the watchlist."


class WatchlistEditor:
    """Holds the session's watchlist and writes it back on each mutation.

    The in-memory list is the source of truth for the session. If a save
    fails the change is kept in memory and ``last_error`` carries the
    message to show the user; the stored copy may then be stale until the
    next successful save.

    Attributes:
        store: Backing WatchlistStore
        last_error: User-facing message for the most recent failure, or None
    """

    def __init__(self, store: WatchlistStore):
        self.store = store
        self.last_error: Optional[str] = None
        self._entries: List[str] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def entries(self) -> List[str]:
        """Copy of the current entries, newest first."""
        return list(self._entries)

    def load(self) -> List[str]:
        """Load the stored watchlist. Only the first call touches storage."""
        if self._loaded:
            return self.entries

        try:
            self._entries = self.store.fetch()
            self.last_error = None
        except WatchlistError as e:
            logger.error(f"{LOAD_FAILED_MESSAGE} {e}")
            self._entries = []
            self.last_error = LOAD_FAILED_MESSAGE
        self._loaded = True
        return self.entries

    def add(self, text: str) -> bool:
        """Put a trimmed entry at the top of the watchlist.

        Args:
            text: Raw user input

        Returns:
            False if ``text`` is blank and nothing was added, True otherwise

        Raises:
            WatchlistNotLoadedError: If ``load`` has not been called
        """
        self._require_loaded()
        entry = text.strip()
        if not entry:
            return False

        self._entries.insert(0, entry)
        self._persist()
        return True

    def remove(self, index: int) -> str:
        """Delete the entry at ``index`` and return it.

        Raises:
            WatchlistNotLoadedError: If ``load`` has not been called
            IndexError: If ``index`` is not a valid position
        """
        self._require_loaded()
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"Watchlist position {index} out of range for "
                f"{len(self._entries)} entries"
            )

        entry = self._entries.pop(index)
        self._persist()
        return entry

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise WatchlistNotLoadedError("Load the watchlist before changing it")

    def _persist(self) -> bool:
        if self.store.save(self._entries):
            self.last_error = None
            return True
        self.last_error = SAVE_FAILED_MESSAGE
        return False
