"""Intent classification for schedule queries.

Maps free text to a match category by keyword containment (no LLM, no
tokenization). Also counts "next" cue words to pick how far ahead to look.
"""

from __future__ import annotations

import re
from enum import StrEnum


class MatchCategory(StrEnum):
    REGULAR = "regular"
    CHALLENGE = "challenge"
    OPEN = "open"
    X_MATCH = "x_match"
    EVENT = "event"
    SALMON_RUN = "salmon_run"


# Declaration order is scan order. Keywords are lowercase.
MATCH_KEYWORDS: dict[MatchCategory, tuple[str, ...]] = {
    MatchCategory.REGULAR: ("レギュラー", "ナワバリ", "regular", "バトル"),
    MatchCategory.CHALLENGE: ("バンカラ",),
    MatchCategory.OPEN: ("バンカラ", "オープン"),
    MatchCategory.X_MATCH: ("x",),
    MatchCategory.EVENT: ("イベント", "event"),
    MatchCategory.SALMON_RUN: ("しゃけ", "シャケ", "サーモン", "salmon", "サモラン", "バイト", "シフト"),
}

# Present in OPEN's required set but not CHALLENGE's
_OPEN_ONLY_KEYWORD = "オープン"

# 次回 must precede 次 so it counts once
_NEXT_PATTERN = re.compile(r"次回|つぎ|次|ネクスト|next|NEXT")


class IntentClassifier:
    """Pick a match category from user text. Pattern matching only."""

    def __init__(self, keywords: dict[MatchCategory, tuple[str, ...]] | None = None) -> None:
        self._keywords = keywords or MATCH_KEYWORDS

    def classify(self, text: str) -> MatchCategory | None:
        """Return the first matching category, or None.

        OPEN needs every one of its keywords and is checked first. Every
        other category matches on any keyword, except that CHALLENGE
        yields to the open-only keyword.
        """
        lowered = text.lower()

        open_keywords = self._keywords.get(MatchCategory.OPEN, ())
        if open_keywords and all(k in lowered for k in open_keywords):
            return MatchCategory.OPEN

        for category, keywords in self._keywords.items():
            if category == MatchCategory.OPEN:
                continue
            if category == MatchCategory.CHALLENGE and _OPEN_ONLY_KEYWORD in lowered:
                continue
            if any(k in lowered for k in keywords):
                return category

        return None


def count_next(text: str, max_count: int) -> int:
    """Count "next" cue words in text, clamped to [0, max_count].

    The result is a zero-based index into a schedule collection: no cue
    word means the current slot.
    """
    return max(0, min(len(_NEXT_PATTERN.findall(text)), max_count))
