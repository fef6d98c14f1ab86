"""Hour-bucketed get-or-fetch cache over a key-value store.

An entry is fresh while the hour-of-day (0-23, in the configured time zone)
of its fetch time equals the current hour-of-day. This is not a rolling
one-hour window: an entry fetched at 10:05 goes stale at 11:00, and an entry
left untouched for exactly a day reads as fresh again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo
from typing import Any

import httpx

from inkbot.errors import UpstreamFetchError
from inkbot.storage.store import CacheEntry, KeyValueStore

logger = logging.getLogger(__name__)


class TimeBucketedCache:
    """Fetches upstream JSON at most once per clock hour per key.

    Failed fetches are not cached and leave any stale entry in place, so
    the next call simply tries again.
    """

    def __init__(
        self,
        store: KeyValueStore,
        http: httpx.AsyncClient,
        tz: tzinfo,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._http = http
        self._tz = tz
        self._clock = clock or (lambda: datetime.now(tz))

    def _hour_of(self, epoch_ms: int) -> int:
        return datetime.fromtimestamp(epoch_ms / 1000, self._tz).hour

    async def get_or_fetch(self, key: str, url: str) -> Any:
        """Return the cached payload for key, refreshing it from url when stale."""
        now = self._clock().astimezone(self._tz)
        current_hour = now.hour

        cached = await self._store.get(key)
        if cached is not None:
            cached_hour = self._hour_of(cached.fetched_at_ms)
            if cached_hour == current_hour:
                logger.info("Cache hit for %s", key)
                return cached.payload
            logger.info(
                "Cache outdated for %s: cached hour = %d, current hour = %d",
                key, cached_hour, current_hour,
            )
        else:
            logger.info("No cache found for %s", key)

        payload = await self._fetch(url)
        await self._store.set(key, CacheEntry(payload=payload, fetched_at_ms=int(now.timestamp() * 1000)))
        logger.info("Cache updated for %s", key)
        return payload

    async def _fetch(self, url: str) -> Any:
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as exc:
            raise UpstreamFetchError(url, reason=str(exc) or type(exc).__name__) from exc

        if not 200 <= response.status_code < 300:
            raise UpstreamFetchError(url, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamFetchError(url, reason=f"invalid JSON body: {exc}") from exc
