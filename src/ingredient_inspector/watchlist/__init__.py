"""Watchlist persistence and editing."""

from .codec import decode_watchlist, encode_watchlist
from .editor import LOAD_FAILED_MESSAGE, SAVE_FAILED_MESSAGE, WatchlistEditor
from .store import WATCHLIST_STORAGE_KEY, WatchlistStore

__all__ = [
    "encode_watchlist",
    "decode_watchlist",
    "WatchlistEditor",
    "WatchlistStore",
    "WATCHLIST_STORAGE_KEY",
    "LOAD_FAILED_MESSAGE",
    "SAVE_FAILED_MESSAGE",
]
