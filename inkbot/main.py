"""inkbot entry point.

Initializes all components and starts the server:
  Settings -> Store -> TimeBucketedCache -> ScheduleService -> LineClient -> App -> Uvicorn

Uses Starlette lifespan to connect and dispose of resources on the same
event loop as uvicorn.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from starlette.applications import Starlette

from inkbot.api.rest import create_app
from inkbot.api.webhook import WebhookProcessor
from inkbot.config import Settings
from inkbot.line.client import LineClient
from inkbot.service import ScheduleService
from inkbot.storage import Database, KeyValueStore, MemoryStore, SqlStore
from inkbot.upstream import TimeBucketedCache, UpstreamData

logger = logging.getLogger(__name__)


def create_components(settings: Settings) -> dict:
    """Build all components in dependency order.

    1. Store - memory or cache_entries table
    2. httpx clients - upstream data and LINE API kept separate
    3. TimeBucketedCache + UpstreamData
    4. ScheduleService
    5. LineClient + WebhookProcessor
    """
    database = None
    store: KeyValueStore
    if settings.cache_backend == "database":
        database = Database(settings)
        store = SqlStore(database)
    else:
        store = MemoryStore()

    timeout = httpx.Timeout(
        connect=settings.http_timeout_connect,
        read=settings.http_timeout_read,
        write=10,
        pool=10,
    )
    upstream_http = httpx.AsyncClient(timeout=timeout, headers={"User-Agent": "inkbot"})
    line_http = httpx.AsyncClient(timeout=timeout)

    cache = TimeBucketedCache(store, upstream_http, settings.tz)
    data = UpstreamData(cache, settings)
    service = ScheduleService(data, settings)

    line = LineClient(settings.channel_access_token, line_http, base_url=settings.line_api_base_url)
    processor = WebhookProcessor(service, line)

    return {
        "database": database,
        "store": store,
        "upstream_http": upstream_http,
        "line_http": line_http,
        "cache": cache,
        "data": data,
        "service": service,
        "line": line,
        "processor": processor,
    }


async def shutdown_components(components: dict) -> None:
    """Graceful shutdown in reverse order."""
    logger.info("Shutting down inkbot...")

    for key in ("line_http", "upstream_http"):
        client = components.get(key)
        if client:
            await client.aclose()

    database = components.get("database")
    if database:
        await database.disconnect()

    logger.info("inkbot shutdown complete.")


def build_app(settings: Settings) -> Starlette:
    """Build the Starlette app with a lifespan that owns component lifecycle."""
    components = create_components(settings)

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        database = components.get("database")
        if database:
            await database.connect()

        # Store on app.state for access in tests
        app.state.components = components
        logger.info("inkbot started (cache=%s, tz=%s)", settings.cache_backend, settings.timezone)
        yield

        await shutdown_components(components)

    return create_app(components["processor"], settings, lifespan=lifespan)


def main() -> None:
    """Entry point -- parse settings, build app, run server."""
    settings = Settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not settings.channel_access_token:
        logger.warning("CHANNEL_ACCESS_TOKEN not set -- /webhook will return 500")

    app = build_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
