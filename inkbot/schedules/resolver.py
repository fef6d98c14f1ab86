"""Schedule resolution -- pick a slot from the schedules document and name it.

The category's config decides, once, whether a node is read as a versus
slot or a co-op shift; the result is a VersusSchedule or CoopSchedule and
nothing downstream inspects raw node shapes again.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any

from inkbot.errors import CategoryNotFoundError
from inkbot.intent import MatchCategory
from inkbot.schedules.schemas import (
    CATEGORY_CONFIGS,
    CategoryConfig,
    CoopSchedule,
    LocaleTable,
    ResolvedSchedule,
    VersusSchedule,
)
from inkbot.utils import NOT_AVAILABLE, format_time_range, parse_timestamp

logger = logging.getLogger(__name__)

# Weapon id keys, in order of preference
_WEAPON_ID_KEYS = ("__splatoon3ink_id", "__id", "id")


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


class ScheduleResolver:
    """Resolve (category, index) against a schedules document."""

    def __init__(
        self,
        tz: tzinfo,
        configs: dict[MatchCategory, CategoryConfig] | None = None,
    ) -> None:
        self._tz = tz
        self._configs = configs or CATEGORY_CONFIGS

    def resolve(
        self,
        category: MatchCategory,
        index: int,
        schedules_doc: dict[str, Any],
        locale: LocaleTable,
    ) -> ResolvedSchedule | None:
        """Return the slot at index, or None when nothing is scheduled there.

        Raises CategoryNotFoundError if the category's collection is missing
        from the document.
        """
        config = self._configs[category]
        nodes = self._collection_nodes(category, config, schedules_doc)

        if index < 0 or index >= len(nodes) or nodes[index] is None:
            logger.debug("No %s schedule at index %d (%d nodes)", category, index, len(nodes))
            return None
        node = _as_dict(nodes[index])

        time_range = self._time_range(node)
        if config.kind == "coop":
            return self._resolve_coop(category, index, config, node, locale, time_range)
        return self._resolve_versus(category, index, config, node, locale, time_range)

    # ------------------------------------------------------------------
    # Node access
    # ------------------------------------------------------------------

    def _collection_nodes(
        self, category: MatchCategory, config: CategoryConfig, schedules_doc: dict[str, Any]
    ) -> list[Any]:
        current: Any = schedules_doc
        for part in config.collection_path.split("."):
            if not isinstance(current, dict) or part not in current:
                raise CategoryNotFoundError(category, config.collection_path)
            current = current[part]

        if not isinstance(current, dict) or not isinstance(current.get("nodes"), list):
            raise CategoryNotFoundError(category, config.collection_path)
        return current["nodes"]

    def _time_range(self, node: dict[str, Any]) -> str:
        periods = _as_list(node.get("timePeriods"))
        source = _as_dict(periods[0]) if periods else node
        start, end = source.get("startTime"), source.get("endTime")
        if not isinstance(start, str) or not isinstance(end, str):
            return NOT_AVAILABLE
        try:
            return format_time_range(parse_timestamp(start), parse_timestamp(end), self._tz)
        except ValueError:
            logger.warning("Unparseable time window %r - %r", start, end)
            return NOT_AVAILABLE

    # ------------------------------------------------------------------
    # Per-kind extraction
    # ------------------------------------------------------------------

    def _versus_setting(self, node: dict[str, Any], config: CategoryConfig) -> dict[str, Any]:
        setting = None
        if config.league_setting_field:
            setting = node.get(config.league_setting_field)
        if setting is None:
            setting = node.get(config.setting_field)

        if isinstance(setting, list):
            position = int(config.variant) if config.variant is not None else 0
            setting = setting[position] if position < len(setting) else None
        return _as_dict(setting)

    def _resolve_versus(
        self,
        category: MatchCategory,
        index: int,
        config: CategoryConfig,
        node: dict[str, Any],
        locale: LocaleTable,
        time_range: str,
    ) -> VersusSchedule:
        setting = self._versus_setting(node, config)
        rule_id = _as_dict(setting.get("vsRule")).get("id")
        stage_names = [
            locale.lookup(locale.stages, _as_dict(stage).get("id"))
            for stage in _as_list(setting.get("vsStages"))
        ]

        event_name = None
        league_event = setting.get("leagueMatchEvent")
        if isinstance(league_event, dict):
            event_name = locale.lookup(locale.events, league_event.get("id"))

        return VersusSchedule(
            category=category,
            title=config.title,
            index=index,
            time_range_display=time_range,
            rule_name=locale.lookup(locale.rules, rule_id),
            stage_names=stage_names,
            event_name=event_name,
        )

    def _resolve_coop(
        self,
        category: MatchCategory,
        index: int,
        config: CategoryConfig,
        node: dict[str, Any],
        locale: LocaleTable,
        time_range: str,
    ) -> CoopSchedule:
        setting = _as_dict(node.get(config.setting_field))
        boss_id = _as_dict(setting.get("boss")).get("id")

        stage = setting.get("coopStage")
        stage_names = []
        if isinstance(stage, dict):
            stage_names.append(locale.lookup(locale.stages, stage.get("id")))

        weapon_names = []
        for weapon in _as_list(setting.get("weapons")):
            weapon = _as_dict(weapon)
            weapon_id = next((weapon[k] for k in _WEAPON_ID_KEYS if weapon.get(k)), None)
            weapon_names.append(locale.lookup(locale.weapons, weapon_id))

        return CoopSchedule(
            category=category,
            title=config.title,
            index=index,
            time_range_display=time_range,
            boss_name=locale.lookup(locale.bosses, boss_id),
            stage_names=stage_names,
            weapon_names=weapon_names,
        )
