"""Webhook event processing.

Events in one delivery are handled concurrently; each event's own steps
run in order. A failure in one event is logged and recorded in its
outcome but never stops its siblings.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Literal

from inkbot.line.client import LineClient
from inkbot.service import ScheduleService

logger = logging.getLogger(__name__)

OutcomeStatus = Literal["replied", "no_reply", "skipped", "failed"]


@dataclass
class EventOutcome:
    """What happened to a single webhook event."""

    status: OutcomeStatus
    reply_token: str | None = None
    error: str | None = None


def is_text_message(event: dict[str, Any]) -> bool:
    message = event.get("message")
    return (
        event.get("type") == "message"
        and isinstance(message, dict)
        and message.get("type") == "text"
    )


class WebhookProcessor:
    """Runs ScheduleService for each text event and replies via LINE."""

    def __init__(self, service: ScheduleService, line: LineClient) -> None:
        self._service = service
        self._line = line

    async def process_events(self, events: list[dict[str, Any]]) -> list[EventOutcome]:
        outcomes = await asyncio.gather(*(self.process_event(event) for event in events))
        failed = sum(1 for o in outcomes if o.status == "failed")
        if failed:
            logger.warning("%d of %d webhook event(s) failed", failed, len(outcomes))
        return list(outcomes)

    async def process_event(self, event: dict[str, Any]) -> EventOutcome:
        if not isinstance(event, dict) or not is_text_message(event):
            return EventOutcome(status="skipped")

        reply_token = event.get("replyToken")
        try:
            messages = await self._service.handle_incoming_text(event["message"].get("text", ""))
            if not messages or not reply_token:
                return EventOutcome(status="no_reply", reply_token=reply_token)

            delivered = await self._line.reply(reply_token, messages)
            if not delivered:
                return EventOutcome(status="failed", reply_token=reply_token, error="reply not delivered")
            return EventOutcome(status="replied", reply_token=reply_token)
        except Exception as e:
            logger.exception("Error processing webhook event")
            return EventOutcome(status="failed", reply_token=reply_token, error=str(e))
