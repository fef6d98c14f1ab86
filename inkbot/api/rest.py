"""REST API for inkbot.

Endpoints:
  GET  /         - Liveness text
  POST /webhook  - LINE webhook deliveries (answered immediately,
                   events processed in the background)
"""

from __future__ import annotations

import logging
from typing import Any

from starlette.applications import Starlette
from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from inkbot.api.webhook import WebhookProcessor
from inkbot.config import Settings

logger = logging.getLogger(__name__)


def create_app(
    processor: WebhookProcessor,
    settings: Settings,
    lifespan: Any | None = None,
) -> Starlette:
    """Create the Starlette ASGI app with all routes."""

    async def index(request: Request) -> PlainTextResponse:
        """GET / - Liveness check."""
        return PlainTextResponse("Hello inkbot!")

    async def webhook(request: Request) -> JSONResponse:
        """POST /webhook - Accept a LINE webhook delivery."""
        try:
            body = await request.json()
        except Exception:
            return JSONResponse({"message": "Invalid JSON body"}, status_code=400)

        if not settings.channel_access_token:
            logger.error("Channel access token is not set")
            return JSONResponse({"message": "Channel access token is not set"}, status_code=500)

        events = body.get("events") if isinstance(body, dict) else None
        if not isinstance(events, list):
            events = []

        # Reply to LINE first; events are handled after the response is sent
        return JSONResponse(
            {"message": "Webhook received"},
            background=BackgroundTask(processor.process_events, events),
        )

    routes = [
        Route("/", index, methods=["GET"]),
        Route("/webhook", webhook, methods=["POST"]),
    ]

    return Starlette(routes=routes, lifespan=lifespan)
