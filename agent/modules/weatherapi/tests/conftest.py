"""Shared fixtures for weatherapi module tests.

The upstream is an ``httpx.MockTransport`` that records every request it
receives, so tests can assert on the exact URL forwarded and on how many
calls were made.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from modules.weatherapi.client import WeatherApiClient
from modules.weatherapi.main import app
from modules.weatherapi.tests.fixtures import API_KEY, BASE_URL, CURRENT_BODY
from modules.weatherapi.tools import WeatherApiTools


class FakeUpstream:
    """Programmable stand-in for WeatherAPI.com."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = CURRENT_BODY
        self.headers = {"content-type": "application/json"}
        self.error: Exception | None = None

    def reply(self, content: bytes, status_code: int = 200, content_type: str = "application/json") -> None:
        self.content = content
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def fail(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last_url(self) -> httpx.URL:
        return self.requests[-1].url


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
async def weather_client(upstream):
    http = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    client = WeatherApiClient(api_key=API_KEY, base_url=BASE_URL, http_client=http)
    yield client
    await http.aclose()


@pytest.fixture
async def client(weather_client):
    """Async test client for the FastAPI app, wired to the fake upstream."""
    previous = getattr(app.state, "weatherapi", None)
    app.state.weatherapi = weather_client
    transport = ASGITransport(app=app)
    try:
        with patch("modules.weatherapi.main.tools", WeatherApiTools(weather_client)):
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                yield c
    finally:
        app.state.weatherapi = previous
