"""Pytest configuration and fixtures for the weather tool tests."""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import httpx
import pytest


def _hour(description: str) -> dict[str, Any]:
    return {"weatherDesc": [{"value": description}]}


def _day(date: str, max_f: str, min_f: str, max_c: str, min_c: str, prefix: str) -> dict[str, Any]:
    # 8 three-hour slots like wttr.in; index 4 is the "midday" slot.
    return {
        "date": date,
        "maxtempF": max_f,
        "mintempF": min_f,
        "maxtempC": max_c,
        "mintempC": min_c,
        "hourly": [_hour(f"{prefix} slot {i}") for i in range(8)],
    }


SAMPLE_DOCUMENT: dict[str, Any] = {
    "current_condition": [
        {
            "temp_F": "72",
            "temp_C": "22",
            "FeelsLikeF": "70",
            "FeelsLikeC": "21",
            "humidity": "45",
            "weatherDesc": [{"value": "Sunny"}],
            "windspeedMiles": "8",
            "winddir16Point": "WSW",
        }
    ],
    "nearest_area": [
        {
            "areaName": [{"value": "Beverly Hills"}],
            "region": [{"value": "California"}],
        }
    ],
    "weather": [
        _day("2026-01-05", "75", "55", "24", "13", "Mon"),
        _day("2026-01-06", "68", "50", "20", "10", "Tue"),
        _day("2026-01-07", "80", "60", "27", "16", "Wed"),
    ],
}


@pytest.fixture
def weather_document() -> dict[str, Any]:
    """A fresh copy of the canned wttr.in j1 document for 90210."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def create_mock_client(
    status: int = 200,
    json_data: Any | None = None,
    content: bytes | None = None,
    handler: Callable[[httpx.Request], httpx.Response] | None = None,
) -> tuple[httpx.AsyncClient, RecordingTransport]:
    """Create an AsyncClient backed by a recording mock transport.

    Args:
        status: HTTP status code to answer with
        json_data: JSON body to answer with
        content: Raw body to answer with (used when json_data is None)
        handler: Custom handler; overrides status/json_data/content

    Returns:
        The client and its transport (for inspecting requests)
    """
    if handler is None:
        def handler(request: httpx.Request) -> httpx.Response:
            if json_data is not None:
                return httpx.Response(status, json=json_data)
            return httpx.Response(status, content=content or b"")

    transport = RecordingTransport(handler)
    return httpx.AsyncClient(transport=transport), transport


@pytest.fixture
def mock_client() -> Callable[..., tuple[httpx.AsyncClient, RecordingTransport]]:
    """Factory for AsyncClients backed by a RecordingTransport."""
    return create_mock_client
