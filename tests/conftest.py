"""Shared fixtures: sample splatoon3.ink documents, fake clock, mock HTTP."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

import httpx
import pytest

from inkbot.config import Settings

TOKYO = ZoneInfo("Asia/Tokyo")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Callable clock whose time is set by the test."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def mock_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    """Create a mock httpx.Response with common attributes."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = json_data if json_data is not None else {}
    resp.text = text
    return resp


def mock_http_client(response: MagicMock | None = None) -> AsyncMock:
    """Create a mock httpx.AsyncClient whose .get()/.post() return response."""
    client = AsyncMock(spec=httpx.AsyncClient)
    if response is not None:
        client.get.return_value = response
        client.post.return_value = response
    return client


def schedules_document() -> dict:
    """Trimmed schedules.json with one or two nodes per collection."""
    return {
        "data": {},
        "regularSchedules": {
            "nodes": [
                {
                    "startTime": "2024-01-01T10:00:00Z",
                    "endTime": "2024-01-01T12:00:00Z",
                    "regularMatchSetting": {
                        "vsRule": {"id": "1"},
                        "vsStages": [{"id": "2"}, {"id": "3"}],
                    },
                },
                {
                    "startTime": "2024-01-01T12:00:00Z",
                    "endTime": "2024-01-01T14:00:00Z",
                    "regularMatchSetting": {
                        "vsRule": {"id": "1"},
                        "vsStages": [{"id": "4"}],
                    },
                },
            ]
        },
        "bankaraSchedules": {
            "nodes": [
                {
                    "startTime": "2024-01-01T10:00:00Z",
                    "endTime": "2024-01-01T12:00:00Z",
                    "bankaraMatchSettings": [
                        {"vsRule": {"id": "10"}, "vsStages": [{"id": "2"}], "mode": "CHALLENGE"},
                        {"vsRule": {"id": "11"}, "vsStages": [{"id": "3"}], "mode": "OPEN"},
                    ],
                }
            ]
        },
        "xSchedules": {
            "nodes": [
                {
                    "startTime": "2024-01-01T10:00:00Z",
                    "endTime": "2024-01-01T12:00:00Z",
                    "xMatchSetting": {"vsRule": {"id": "12"}, "vsStages": [{"id": "4"}]},
                }
            ]
        },
        "eventSchedules": {
            "nodes": [
                {
                    "leagueMatchSetting": {
                        "leagueMatchEvent": {"id": "ev1", "name": "Splat Zones Battle"},
                        "vsRule": {"id": "10"},
                        "vsStages": [{"id": "3"}],
                    },
                    "timePeriods": [
                        {"startTime": "2024-01-02T01:00:00Z", "endTime": "2024-01-02T03:00:00Z"},
                        {"startTime": "2024-01-02T05:00:00Z", "endTime": "2024-01-02T07:00:00Z"},
                    ],
                }
            ]
        },
        "coopGroupingSchedule": {
            "regularSchedules": {
                "nodes": [
                    {
                        "startTime": "2024-01-01T08:00:00Z",
                        "endTime": "2024-01-02T00:00:00Z",
                        "setting": {
                            "boss": {"id": "boss1"},
                            "coopStage": {"id": "c1"},
                            "weapons": [
                                {"__splatoon3ink_id": "w1"},
                                {"__splatoon3ink_id": "w2"},
                                {"__splatoon3ink_id": "unknown"},
                            ],
                        },
                    }
                ]
            }
        },
    }


def locale_document() -> dict:
    """Trimmed ja-JP locale document."""
    return {
        "rules": {
            "1": {"name": "Turf War"},
            "10": {"name": "ガチエリア"},
            "11": {"name": "ガチヤグラ"},
            "12": {"name": "ガチホコバトル"},
        },
        "stages": {
            "2": {"name": "Scorch Gorge"},
            "3": {"name": "Eeltail Alley"},
            "4": {"name": "Hagglefish Market"},
            "c1": {"name": "Spawning Grounds"},
        },
        "bosses": {"boss1": {"name": "ヨコヅナ"}},
        "weapons": {
            "w1": {"name": "わかばシューター"},
            "w2": {"name": "スプラローラー"},
        },
        "events": {"ev1": {"name": "エリア頂上決戦", "desc": "", "regulation": ""}},
        "festivals": {},
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """In-memory settings with a configured LINE token."""
    return Settings(
        CHANNEL_ACCESS_TOKEN="test-token",
        cache_backend="memory",
        timezone="Asia/Tokyo",
        max_lookahead=5,
        _env_file=None,
    )


@pytest.fixture
def schedules_doc() -> dict:
    return schedules_document()


@pytest.fixture
def locale_doc() -> dict:
    return locale_document()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 19, 5, tzinfo=TOKYO))
