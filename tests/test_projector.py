"""Tests for LINE card rendering and time-range formatting."""

from datetime import UTC, datetime

from inkbot.intent import MatchCategory
from inkbot.render import project, text_message
from inkbot.render.projector import (
    HEADER_CURRENT,
    LABEL_BOSS,
    LABEL_EVENT,
    LABEL_RULE,
    LABEL_STAGES,
    LABEL_WEAPONS,
)
from inkbot.schedules import CoopSchedule, VersusSchedule
from inkbot.utils import format_time_range
from tests.conftest import TOKYO


def _versus(**overrides) -> VersusSchedule:
    fields = {
        "category": MatchCategory.REGULAR,
        "title": "ナワバリマッチ",
        "index": 0,
        "time_range_display": "1/1(月) 19:00 – 1/1 21:00",
        "rule_name": "Turf War",
        "stage_names": ["Scorch Gorge", "Eeltail Alley"],
    }
    fields.update(overrides)
    return VersusSchedule(**fields)


def _coop(**overrides) -> CoopSchedule:
    fields = {
        "category": MatchCategory.SALMON_RUN,
        "title": "サーモンラン",
        "index": 0,
        "time_range_display": "1/1(月) 17:00 – 1/2 9:00",
        "boss_name": "ヨコヅナ",
        "stage_names": ["Spawning Grounds"],
        "weapon_names": ["わかばシューター", "スプラローラー"],
    }
    fields.update(overrides)
    return CoopSchedule(**fields)


def _body(card: dict) -> list[dict]:
    return card["contents"]["body"]["contents"]


def _sections(card: dict) -> dict[str, list[str]]:
    """Map section label -> its lines."""
    sections = {}
    for block in _body(card):
        if block["type"] == "box":
            label, *lines = [item["text"] for item in block["contents"]]
            sections[label] = lines
    return sections


def _header(card: dict) -> str:
    return card["contents"]["header"]["contents"][0]["text"]


class TestProjectVersus:
    def test_card_shape(self):
        card = project(_versus())

        assert card["type"] == "flex"
        assert card["altText"] == "ナワバリマッチ 1/1(月) 19:00 – 1/1 21:00"
        assert card["contents"]["type"] == "bubble"
        assert _header(card) == HEADER_CURRENT
        body = _body(card)
        assert body[0]["text"] == "ナワバリマッチ"
        assert body[1]["text"] == "1/1(月) 19:00 – 1/1 21:00"

    def test_rule_and_stage_sections(self):
        sections = _sections(project(_versus()))

        assert sections[LABEL_RULE] == ["Turf War"]
        assert sections[LABEL_STAGES] == ["Scorch Gorge", "Eeltail Alley"]
        assert LABEL_WEAPONS not in sections
        assert LABEL_EVENT not in sections

    def test_empty_stages_emit_no_block(self):
        sections = _sections(project(_versus(stage_names=[])))

        assert LABEL_STAGES not in sections
        assert sections[LABEL_RULE] == ["Turf War"]

    def test_na_rule_still_rendered(self):
        assert _sections(project(_versus(rule_name="N/A")))[LABEL_RULE] == ["N/A"]

    def test_event_name_section(self):
        sections = _sections(project(_versus(event_name="エリア頂上決戦")))
        assert sections[LABEL_EVENT] == ["エリア頂上決戦"]

    def test_lookahead_header(self):
        assert _header(project(_versus(index=2))) == "2つ先のスケジュール"

    def test_projection_is_deterministic(self):
        resolved = _versus()
        assert project(resolved) == project(resolved)


class TestProjectCoop:
    def test_boss_stage_and_weapons(self):
        sections = _sections(project(_coop()))

        assert sections[LABEL_BOSS] == ["ヨコヅナ"]
        assert sections[LABEL_STAGES] == ["Spawning Grounds"]
        assert sections[LABEL_WEAPONS] == ["わかばシューター", "スプラローラー"]
        assert LABEL_RULE not in sections

    def test_no_weapons_emits_no_weapon_block(self):
        sections = _sections(project(_coop(weapon_names=[])))
        assert LABEL_WEAPONS not in sections


def test_text_message():
    assert text_message("hi") == {"type": "text", "text": "hi"}


class TestFormatTimeRange:
    def test_converts_to_target_zone(self):
        start = datetime(2024, 1, 1, 10, 0, tzinfo=UTC)
        end = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert format_time_range(start, end, TOKYO) == "1/1(月) 19:00 – 1/1 21:00"

    def test_no_padding_except_minutes(self):
        start = datetime(2024, 3, 2, 0, 5, tzinfo=TOKYO)
        end = datetime(2024, 3, 2, 2, 5, tzinfo=TOKYO)
        assert format_time_range(start, end, TOKYO) == "3/2(土) 0:05 – 3/2 2:05"

    def test_range_crossing_midnight(self):
        start = datetime(2024, 12, 31, 23, 0, tzinfo=TOKYO)
        end = datetime(2025, 1, 1, 1, 0, tzinfo=TOKYO)
        assert format_time_range(start, end, TOKYO) == "12/31(火) 23:00 – 1/1 1:00"

    def test_sunday_is_first_weekday(self):
        start = datetime(2024, 1, 7, 9, 0, tzinfo=TOKYO)
        assert format_time_range(start, start, TOKYO).startswith("1/7(日)")
