"""Known upstream documents and typed getters over the hourly cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from inkbot.config import Settings
from inkbot.upstream.cache import TimeBucketedCache


@dataclass(frozen=True)
class UpstreamResource:
    """A remote JSON document identified by its cache key."""

    key: str
    url: str


class UpstreamData:
    """splatoon3.ink documents, each cached independently by the hour."""

    def __init__(self, cache: TimeBucketedCache, settings: Settings) -> None:
        self._cache = cache
        self.schedules = UpstreamResource("schedules", settings.schedules_url)
        self.locale = UpstreamResource("locale_ja_JP", settings.locale_url)
        self.festivals = UpstreamResource("festivals", settings.festivals_url)
        self.coop = UpstreamResource("coop", settings.coop_url)

    @property
    def resources(self) -> list[UpstreamResource]:
        """Every registered document, in registration order."""
        return [self.schedules, self.locale, self.festivals, self.coop]

    async def get(self, resource: UpstreamResource) -> Any:
        return await self._cache.get_or_fetch(resource.key, resource.url)

    async def get_schedules(self) -> dict[str, Any]:
        """Schedule information (regular, bankara, X, event, co-op)."""
        return await self.get(self.schedules)

    async def get_locale(self) -> dict[str, Any]:
        """ja-JP display names for rules, stages, bosses, weapons, events."""
        return await self.get(self.locale)

    async def get_festivals(self) -> dict[str, Any]:
        """Splatfest records per region."""
        return await self.get(self.festivals)

    async def get_coop(self) -> dict[str, Any]:
        """Salmon Run monthly gear and co-op metadata."""
        return await self.get(self.coop)
