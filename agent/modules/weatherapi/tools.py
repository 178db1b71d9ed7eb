"""WeatherAPI module tool implementations."""

from __future__ import annotations

import json
from typing import Any

import structlog

from modules.weatherapi.client import WeatherApiClient

logger = structlog.get_logger()


class WeatherApiTools:
    """Runs manifest tools against the passthrough client."""

    def __init__(self, client: WeatherApiClient):
        self.client = client
        self._handlers = {
            "current": client.current,
            "forecast": client.forecast,
            "history": client.history,
            "alerts": client.alerts,
            "marine": client.marine,
            "future": client.future,
            "search": client.search,
            "iplookup": client.ip_lookup,
            "astronomy": client.astronomy,
            "timezone": client.timezone,
            "sports": client.sports,
        }

    def has_tool(self, tool_name: str) -> bool:
        return tool_name.split(".")[-1] in self._handlers

    async def run(self, tool_name: str, arguments: dict[str, Any]) -> Any:
        """Execute ``tool_name`` and return the decoded upstream JSON.

        Raises:
            KeyError: For an unknown tool.
            TypeError: For arguments the operation does not accept.
            WeatherApiError: Propagated from the client.
        """
        handler = self._handlers[tool_name.split(".")[-1]]
        upstream = await handler(**arguments)
        return json.loads(upstream.content)
