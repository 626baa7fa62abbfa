"""pytest fixtures"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

BASE_URL = "https://mb.test/ws/2"

NIRVANA: dict[str, Any] = {
    "id": "5b11f4ce-a62d-471e-81fc-a69a8278c7da",
    "type": "Group",
    "type-id": "e431f5f6-b5d2-343d-8b36-72607fffb74b",
    "score": 100,
    "name": "Nirvana",
    "sort-name": "Nirvana",
    "country": "US",
    "area": {
        "id": "489ce91b-6658-3307-9877-795b68554c98",
        "type": "Country",
        "name": "United States",
        "sort-name": "United States",
        "iso-3166-1-codes": ["US"],
    },
    "begin-area": {
        "id": "a640b45c-c173-49b1-8030-973603e895b5",
        "name": "Aberdeen",
        "sort-name": "Aberdeen",
    },
    "disambiguation": "90s US grunge band",
    "isnis": ["0000000123486830"],
    "life-span": {"begin": "1987", "end": "1994-04-05", "ended": True},
    "aliases": [
        {"name": "Nirvana US", "sort-name": "Nirvana US", "locale": None, "type": None, "primary": None},
    ],
    "tags": [{"count": 12, "name": "grunge"}, {"count": 4, "name": "rock"}],
}


def search_payload(*artists: dict[str, Any], count: int | None = None, offset: int = 0) -> dict[str, Any]:
    return {
        "created": "2024-01-01T00:00:00.000Z",
        "count": len(artists) if count is None else count,
        "offset": offset,
        "artists": list(artists),
    }


@pytest.fixture
def settings() -> AppSettings:
    """settings isolated from .env files"""
    return AppSettings(
        _env_file=None,
        base_url=BASE_URL,
        user_agent="mb-artists-tests/1.0 ( tests@example.invalid )",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def mock_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    """wrap a request handler, recording every request it sees"""

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _factory
