"""Exception types raised by the schedule core."""

from __future__ import annotations


class InkbotError(Exception):
    """Base class for all inkbot errors."""


class UpstreamFetchError(InkbotError):
    """An upstream resource could not be fetched or parsed."""

    def __init__(self, url: str, status_code: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"status {status_code}" if status_code is not None else reason or "transport error"
        super().__init__(f"Failed to fetch data from {url} ({detail})")


class CategoryNotFoundError(InkbotError):
    """The configured schedule collection is missing from the schedules document."""

    def __init__(self, category: str, path: str) -> None:
        self.category = category
        self.path = path
        super().__init__(f"Schedule collection '{path}' not found for category {category}")


class InvalidIntentError(InkbotError):
    """No match category could be read from the user's text."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No match category recognised in: {text[:80]!r}")
