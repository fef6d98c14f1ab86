"""Schedule service -- the single entry point the webhook layer calls.

  text -> IntentClassifier -> category
  text -> count_next -> index
  schedules + locale (hourly cache) -> ScheduleResolver -> project()
"""

from __future__ import annotations

import logging
from typing import Any

from inkbot.config import Settings
from inkbot.errors import InvalidIntentError
from inkbot.intent import IntentClassifier, count_next
from inkbot.render.projector import project, text_message
from inkbot.schedules.resolver import ScheduleResolver
from inkbot.schedules.schemas import LocaleTable, ResolvedSchedule
from inkbot.upstream.resources import UpstreamData

logger = logging.getLogger(__name__)

NOT_UNDERSTOOD_TEXT = (
    "ごめんなさい、よくわかりませんでした。\n"
    "「ナワバリ」「バンカラ」「バンカラ オープン」「X」「イベント」「サーモンラン」"
    "のように送ってください。「次」を付けると先のスケジュールを表示します。"
)
NOT_FOUND_TEXT = "スケジュールが見つかりませんでした。"


class ScheduleService:
    """Turns one inbound text into the messages to reply with."""

    def __init__(
        self,
        data: UpstreamData,
        settings: Settings,
        classifier: IntentClassifier | None = None,
        resolver: ScheduleResolver | None = None,
    ) -> None:
        self._data = data
        self._settings = settings
        self._classifier = classifier or IntentClassifier()
        self._resolver = resolver or ScheduleResolver(settings.tz)

    async def resolve_text(self, text: str) -> ResolvedSchedule | None:
        """Resolve text to a schedule slot, or None if nothing is scheduled.

        Raises InvalidIntentError when no category is recognised, and lets
        UpstreamFetchError / CategoryNotFoundError propagate.
        """
        category = self._classifier.classify(text)
        if category is None:
            raise InvalidIntentError(text)

        index = count_next(text, self._settings.max_lookahead)
        logger.debug("Classified %r as %s (index %d)", text[:80], category, index)

        schedules = await self._data.get_schedules()
        locale = LocaleTable.from_document(await self._data.get_locale())
        return self._resolver.resolve(category, index, schedules, locale)

    async def handle_incoming_text(self, text: str) -> list[dict[str, Any]]:
        """Return the reply messages for text (empty list means no reply)."""
        try:
            resolved = await self.resolve_text(text)
        except InvalidIntentError:
            if not self._settings.reply_on_unknown:
                return []
            return [text_message(NOT_UNDERSTOOD_TEXT)]

        if resolved is None:
            return [text_message(NOT_FOUND_TEXT)]
        return [project(resolved)]
