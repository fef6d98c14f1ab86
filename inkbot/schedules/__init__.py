"""Schedules module -- category configuration and slot resolution.

Public API: ScheduleResolver + all schema types from schemas.py.
"""

from inkbot.schedules.resolver import ScheduleResolver
from inkbot.schedules.schemas import (
    CATEGORY_CONFIGS,
    BankaraVariant,
    CategoryConfig,
    CoopSchedule,
    LocaleTable,
    ResolvedSchedule,
    VersusSchedule,
)

__all__ = [
    "ScheduleResolver",
    "CATEGORY_CONFIGS",
    "BankaraVariant",
    "CategoryConfig",
    "LocaleTable",
    # Resolved slots
    "CoopSchedule",
    "ResolvedSchedule",
    "VersusSchedule",
]
