"""LINE Messaging API reply client.

Usage:
    client = LineClient(token, http)
    await client.reply(reply_token, [text_message("hi")])

Delivery failures are logged and reported via the return value, never
retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

REPLY_PATH = "/v2/bot/message/reply"

# LINE accepts at most 5 messages per reply
MAX_REPLY_MESSAGES = 5


class LineClient:
    """Thin wrapper over the reply endpoint."""

    def __init__(
        self,
        access_token: str,
        http: httpx.AsyncClient,
        base_url: str = "https://api.line.me",
    ) -> None:
        self._access_token = access_token
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def reply(self, reply_token: str, messages: list[dict[str, Any]]) -> bool:
        """Send messages as a reply. Returns True on a 2xx response."""
        if not messages:
            return False
        if len(messages) > MAX_REPLY_MESSAGES:
            logger.warning("Dropping %d reply message(s) over the LINE limit", len(messages) - MAX_REPLY_MESSAGES)
            messages = messages[:MAX_REPLY_MESSAGES]

        response = await self._http.post(
            f"{self._base_url}{REPLY_PATH}",
            json={"replyToken": reply_token, "messages": messages},
            headers={
                "Authorization": f"Bearer {self._access_token}",
                "Content-Type": "application/json",
            },
        )
        if not 200 <= response.status_code < 300:
            logger.warning("LINE reply failed (%d): %s", response.status_code, response.text[:200])
            return False
        return True
