"""Storage module -- key-value persistence for cached upstream documents."""

from inkbot.storage.database import Database
from inkbot.storage.store import CacheEntry, KeyValueStore, MemoryStore, SqlStore

__all__ = [
    "CacheEntry",
    "Database",
    "KeyValueStore",
    "MemoryStore",
    "SqlStore",
]
