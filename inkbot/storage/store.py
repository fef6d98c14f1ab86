"""Key-value stores backing the upstream cache.

Both stores hold at most one CacheEntry per key; set() overwrites.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from inkbot.storage.database import Database
from inkbot.storage.models import CacheEntryRow

logger = logging.getLogger(__name__)

# Dialect-specific INSERT constructs that support ON CONFLICT
_UPSERT_INSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


@dataclass(frozen=True)
class CacheEntry:
    """A cached upstream document and the epoch-ms time it was fetched."""

    payload: Any
    fetched_at_ms: int


class KeyValueStore(Protocol):
    async def get(self, key: str) -> CacheEntry | None: ...

    async def set(self, key: str, entry: CacheEntry) -> None: ...


class MemoryStore:
    """Process-local store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    async def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    async def set(self, key: str, entry: CacheEntry) -> None:
        self._entries[key] = entry

    def __len__(self) -> int:
        return len(self._entries)


class SqlStore:
    """Store backed by the cache_entries table."""

    def __init__(self, database: Database) -> None:
        self._db = database

    async def get(self, key: str) -> CacheEntry | None:
        async with self._db.session() as session:
            row = await session.get(CacheEntryRow, key)
            if row is None:
                return None
            return CacheEntry(payload=row.payload, fetched_at_ms=row.fetched_at_ms)

    async def set(self, key: str, entry: CacheEntry) -> None:
        """Upsert in one statement so concurrent first writes for a key both succeed."""
        insert = _UPSERT_INSERTS[self._db.engine.dialect.name]
        stmt = insert(CacheEntryRow).values(key=key, payload=entry.payload, fetched_at_ms=entry.fetched_at_ms)
        stmt = stmt.on_conflict_do_update(
            index_elements=[CacheEntryRow.key],
            set_={
                "payload": stmt.excluded.payload,
                "fetched_at_ms": stmt.excluded.fetched_at_ms,
                "updated_at": func.now(),
            },
        )
        async with self._db.session() as session:
            await session.execute(stmt)
            await session.commit()
        logger.debug("Stored cache entry %s (fetched_at_ms=%d)", key, entry.fetched_at_ms)
