"""LINE Messaging API client."""

from inkbot.line.client import LineClient

__all__ = ["LineClient"]
