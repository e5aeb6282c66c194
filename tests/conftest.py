"""
Shared test fixtures for the OpenWeatherMap client tests.

Provides a recording mock transport, canned upstream payloads, and a
factory that wires a client to the transport.
"""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from openweather_api.client import OpenWeatherAPI


ONECALL_PATH = "/data/2.5/onecall"
DIRECT_GEO_PATH = "/geo/1.0/direct"
REVERSE_GEO_PATH = "/geo/1.0/reverse"


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses.

    Responses are matched by URL path. A value may be a
    ``(status_code, json_data)`` tuple or a prebuilt ``httpx.Response``.
    Every request is recorded for later inspection.
    """

    def __init__(self, responses: dict[str, Any]):
        self.responses = responses
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.path
        if path in self.responses:
            response = self.responses[path]
            if isinstance(response, httpx.Response):
                return response
            status, data = response
            return httpx.Response(status, json=data)

        return httpx.Response(404, json={"cod": "404", "message": "Not found"})

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport that fails before any response is produced."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raise httpx.ConnectError("connection refused", request=request)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


PARIS_GEO = [{"name": "Paris", "lat": 48.8589, "lon": 2.32, "country": "FR"}]

BERLIN_GEO = [{"name": "Berlin", "lat": 52.517, "lon": 13.3889, "country": "DE"}]

ONECALL_PAYLOAD: dict[str, Any] = {
    "lat": 10,
    "lon": 20,
    "timezone": "Africa/Lagos",
    "timezone_offset": 3600,
    "current": {
        "dt": 1700000000,
        "sunrise": 1699997000,
        "sunset": 1700040000,
        "temp": 28.4,
        "feels_like": 31.2,
        "pressure": 1011,
        "humidity": 70,
        "dew_point": 22.3,
        "uvi": 5.1,
        "clouds": 40,
        "visibility": 10000,
        "wind_speed": 3.2,
        "wind_deg": 210,
        "wind_gust": 5.5,
        "rain": {"1h": 0.4},
        "weather": [
            {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
        ],
    },
    "minutely": [
        {"dt": 1700000040, "precipitation": 0.1},
        {"dt": 1700000100, "precipitation": 0},
        {"dt": 1700000160, "precipitation": 0.3},
    ],
    "hourly": [
        {
            "dt": 1700000000 + 3600 * i,
            "temp": 28.0 - i,
            "feels_like": 30.0 - i,
            "pressure": 1011,
            "humidity": 70,
            "dew_point": 22.0,
            "uvi": 4.0,
            "clouds": 40,
            "visibility": 10000,
            "wind_speed": 3.0,
            "wind_deg": 200,
            "pop": 0.2,
            "weather": [
                {"id": 802, "main": "Clouds", "description": "scattered clouds", "icon": "03d"}
            ],
        }
        for i in range(4)
    ],
    "daily": [
        {
            "dt": 1699963200 + 86400 * i,
            "sunrise": 1699997000 + 86400 * i,
            "sunset": 1700040000 + 86400 * i,
            "moonrise": 1699990000 + 86400 * i,
            "moonset": 1700030000 + 86400 * i,
            "moon_phase": 0.1 * i,
            "temp": {
                "day": 30.0 + i,
                "min": 22.0,
                "max": 32.0 + i,
                "night": 24.0,
                "eve": 27.0,
                "morn": 23.0,
            },
            "feels_like": {"day": 33.0, "night": 25.0, "eve": 29.0, "morn": 24.0},
            "pressure": 1010,
            "humidity": 65,
            "dew_point": 21.0,
            "wind_speed": 4.0,
            "wind_deg": 220,
            "clouds": 50,
            "pop": 0.6,
            "rain": 2.5,
            "uvi": 9.0,
            "weather": [
                {"id": 501, "main": "Rain", "description": "moderate rain", "icon": "10d"}
            ],
        }
        for i in range(8)
    ],
    "alerts": [
        {
            "sender_name": "NiMet",
            "event": "Heavy rain",
            "start": 1700000000,
            "end": 1700086400,
            "description": "Heavy rainfall expected.",
            "tags": ["Rain"],
        }
    ],
}


def onecall_payload() -> dict[str, Any]:
    """Fresh copy so tests can't leak mutations into each other."""
    return copy.deepcopy(ONECALL_PAYLOAD)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create a mock transport with the common upstream responses."""
    return MockTransport({
        ONECALL_PATH: (200, onecall_payload()),
        DIRECT_GEO_PATH: (200, PARIS_GEO),
        REVERSE_GEO_PATH: (200, PARIS_GEO),
    })


@pytest.fixture
def make_client(
    mock_transport: MockTransport,
) -> Callable[..., tuple[OpenWeatherAPI, MockTransport]]:
    """Factory: build a client whose HTTP goes through ``mock_transport``."""

    def _make(
        options: dict[str, Any] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> tuple[OpenWeatherAPI, Any]:
        transport = transport or mock_transport
        api = OpenWeatherAPI(
            options,
            http_client=httpx.AsyncClient(transport=transport),
        )
        return api, transport

    return _make


@pytest.fixture
def coords_client(make_client) -> tuple[OpenWeatherAPI, MockTransport]:
    """Client configured with a key and fixed coordinates."""
    return make_client({"key": "abc", "coordinates": {"lat": 10, "lon": 20}})


class HeldTransport(MockTransport):
    """
    MockTransport that parks requests to ``hold_path`` until released.

    ``held`` is set once such a request arrives; setting ``release`` lets
    it complete. Used to interleave client calls deterministically.
    """

    def __init__(self, responses: dict[str, Any], hold_path: str):
        super().__init__(responses)
        self.hold_path = hold_path
        self.held = asyncio.Event()
        self.release = asyncio.Event()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == self.hold_path:
            self.held.set()
            await self.release.wait()
        return await super().handle_async_request(request)
