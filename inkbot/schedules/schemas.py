"""Pydantic DTOs and static configuration for schedule resolution.

These models define the contract between ScheduleResolver and the
presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from inkbot.intent import MatchCategory
from inkbot.utils import NOT_AVAILABLE

ScheduleKind = Literal["versus", "coop"]


class BankaraVariant(IntEnum):
    """Position of each bankara setting inside bankaraMatchSettings."""

    CHALLENGE = 0
    OPEN = 1


@dataclass(frozen=True)
class CategoryConfig:
    """Where a category's schedules live and how to read them."""

    collection_path: str  # Dot-path into the schedules document
    setting_field: str
    title: str
    kind: ScheduleKind = "versus"
    variant: BankaraVariant | None = None
    league_setting_field: str | None = None


CATEGORY_CONFIGS: dict[MatchCategory, CategoryConfig] = {
    MatchCategory.REGULAR: CategoryConfig(
        collection_path="regularSchedules",
        setting_field="regularMatchSetting",
        title="ナワバリマッチ",
    ),
    MatchCategory.CHALLENGE: CategoryConfig(
        collection_path="bankaraSchedules",
        setting_field="bankaraMatchSettings",
        title="バンカラマッチ (チャレンジ)",
        variant=BankaraVariant.CHALLENGE,
    ),
    MatchCategory.OPEN: CategoryConfig(
        collection_path="bankaraSchedules",
        setting_field="bankaraMatchSettings",
        title="バンカラマッチ (オープン)",
        variant=BankaraVariant.OPEN,
    ),
    MatchCategory.X_MATCH: CategoryConfig(
        collection_path="xSchedules",
        setting_field="xMatchSetting",
        title="Xマッチ",
    ),
    MatchCategory.EVENT: CategoryConfig(
        collection_path="eventSchedules",
        setting_field="eventMatchSetting",
        title="イベントマッチ",
        league_setting_field="leagueMatchSetting",
    ),
    MatchCategory.SALMON_RUN: CategoryConfig(
        collection_path="coopGroupingSchedule.regularSchedules",
        setting_field="setting",
        title="サーモンラン",
        kind="coop",
    ),
}


@dataclass
class LocaleTable:
    """id -> display name lookups from the upstream locale document."""

    rules: dict[str, Any] = field(default_factory=dict)
    stages: dict[str, Any] = field(default_factory=dict)
    bosses: dict[str, Any] = field(default_factory=dict)
    weapons: dict[str, Any] = field(default_factory=dict)
    events: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: dict[str, Any] | None) -> LocaleTable:
        document = document or {}
        return cls(
            rules=document.get("rules") or {},
            stages=document.get("stages") or {},
            bosses=document.get("bosses") or {},
            weapons=document.get("weapons") or {},
            events=document.get("events") or {},
        )

    @staticmethod
    def lookup(table: dict[str, Any], item_id: Any) -> str:
        """Name for item_id in table, or N/A when either is missing."""
        if item_id is None:
            return NOT_AVAILABLE
        entry = table.get(str(item_id))
        if not isinstance(entry, dict) or not entry.get("name"):
            return NOT_AVAILABLE
        return entry["name"]


# --- Resolved schedules ---


class ResolvedSchedule(BaseModel):
    """Fields common to every resolved schedule slot."""

    category: MatchCategory
    title: str
    index: int = Field(ge=0)
    time_range_display: str
    stage_names: list[str] = Field(default_factory=list)


class VersusSchedule(ResolvedSchedule):
    """A versus slot: one rule and its stages."""

    kind: Literal["versus"] = "versus"
    rule_name: str
    event_name: str | None = None


class CoopSchedule(ResolvedSchedule):
    """A Salmon Run shift: boss, stage and supplied weapons."""

    kind: Literal["coop"] = "coop"
    boss_name: str
    weapon_names: list[str] = Field(default_factory=list)
