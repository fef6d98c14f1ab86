"""LINE message rendering for resolved schedules.

Cards are Flex messages with a fixed block order: header, title, time
range, rule (or boss), stages, then supplied weapons for Salmon Run.
Empty lists produce no block at all.
"""

from __future__ import annotations

from typing import Any

from inkbot.schedules.schemas import CoopSchedule, ResolvedSchedule, VersusSchedule

CardPayload = dict[str, Any]

HEADER_CURRENT = "現在のスケジュール"
HEADER_AHEAD = "{index}つ先のスケジュール"
LABEL_RULE = "ルール"
LABEL_BOSS = "オカシラシャケ"
LABEL_STAGES = "ステージ"
LABEL_WEAPONS = "支給ブキ"
LABEL_EVENT = "イベント"

_LABEL_COLOR = "#888888"
_ACCENT_COLOR = "#F02D7D"
_COOP_COLOR = "#FF6200"


def text_message(text: str) -> dict[str, Any]:
    """Plain LINE text message."""
    return {"type": "text", "text": text}


def _text(text: str, **style: Any) -> dict[str, Any]:
    return {"type": "text", "text": text, "wrap": True, **style}


def _section(label: str, lines: list[str]) -> dict[str, Any]:
    return {
        "type": "box",
        "layout": "vertical",
        "margin": "lg",
        "spacing": "sm",
        "contents": [
            _text(label, size="xs", color=_LABEL_COLOR),
            *[_text(line, size="md") for line in lines],
        ],
    }


def _header_label(index: int) -> str:
    return HEADER_CURRENT if index == 0 else HEADER_AHEAD.format(index=index)


def project(resolved: ResolvedSchedule) -> CardPayload:
    """Build a Flex message card for a resolved schedule slot."""
    is_coop = isinstance(resolved, CoopSchedule)
    accent = _COOP_COLOR if is_coop else _ACCENT_COLOR

    body: list[dict[str, Any]] = [
        _text(resolved.title, weight="bold", size="xl", color=accent),
        _text(resolved.time_range_display, size="sm", color=_LABEL_COLOR),
    ]

    if isinstance(resolved, VersusSchedule):
        if resolved.event_name is not None:
            body.append(_section(LABEL_EVENT, [resolved.event_name]))
        body.append(_section(LABEL_RULE, [resolved.rule_name]))
    elif isinstance(resolved, CoopSchedule):
        body.append(_section(LABEL_BOSS, [resolved.boss_name]))

    if resolved.stage_names:
        body.append(_section(LABEL_STAGES, list(resolved.stage_names)))

    if isinstance(resolved, CoopSchedule) and resolved.weapon_names:
        body.append(_section(LABEL_WEAPONS, list(resolved.weapon_names)))

    return {
        "type": "flex",
        "altText": f"{resolved.title} {resolved.time_range_display}",
        "contents": {
            "type": "bubble",
            "header": {
                "type": "box",
                "layout": "vertical",
                "contents": [_text(_header_label(resolved.index), size="sm", color=_LABEL_COLOR)],
            },
            "body": {
                "type": "box",
                "layout": "vertical",
                "contents": body,
            },
        },
    }
