# tests/conftest.py
"""Shared pytest fixtures for Radiant tests."""

from unittest.mock import AsyncMock

import pytest

from core.radiant.system import SystemMode
from core.radiant.zone_accessory import ZoneStateAdapter


class FakeMessanaApi:
    """In-memory stand-in for MessanaClient's async interface.

    responses maps endpoint path -> JSON object. fetch_json and put_json are
    AsyncMocks so tests can assert on calls.
    """

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.fetch_json = AsyncMock(side_effect=self._fetch)
        self.put_json = AsyncMock(return_value=None)

    async def _fetch(self, path):
        return self.responses[path]

    def fetched_paths(self) -> list[str]:
        return [c.args[0] for c in self.fetch_json.call_args_list]


@pytest.fixture
def fake_api() -> FakeMessanaApi:
    return FakeMessanaApi({
        "zone/thermalStatus/3": {"status": 2},
        "zone/status/3": {"status": 1},
        "hc/mode/0": {"value": 1},
        "zone/temperature/3": {"value": 68},
        "zone/setpoint/3": {"value": 77},
    })


@pytest.fixture
def zone(fake_api) -> ZoneStateAdapter:
    return ZoneStateAdapter(3, fake_api, system=SystemMode(fake_api), name="Office")
