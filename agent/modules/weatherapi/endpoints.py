"""WeatherAPI.com endpoint table.

Each entry maps an operation name to its upstream path and the query
parameters it forwards. Parameters are forwarded in declaration order,
after the credential.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    """A single upstream operation."""

    name: str
    path: str
    summary: str
    required: tuple[str, ...] = ("q",)
    optional: dict[str, Any] = field(default_factory=dict)

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.required + tuple(self.optional)


ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        Endpoint("current", "current.json", "Current weather for a location"),
        Endpoint(
            "forecast",
            "forecast.json",
            "Weather forecast for a location and number of days",
            optional={"days": 1},
        ),
        Endpoint(
            "history",
            "history.json",
            "Historical weather for a location and date",
            required=("q", "dt"),
        ),
        Endpoint("alerts", "alerts.json", "Weather alerts for a location"),
        Endpoint("marine", "marine.json", "Marine weather for a location"),
        Endpoint(
            "future",
            "future.json",
            "Future weather for a location and date",
            required=("q", "dt"),
        ),
        Endpoint("search", "search.json", "Location search / autocomplete"),
        Endpoint("iplookup", "ip.json", "Location and time zone for an IP address"),
        Endpoint(
            "astronomy",
            "astronomy.json",
            "Sunrise, sunset and moon data for a location and date",
            required=("q", "dt"),
        ),
        Endpoint("timezone", "timezone.json", "Time zone for a location"),
        Endpoint("sports", "sports.json", "Upcoming sports events for a location"),
    )
}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by operation name.

    Raises:
        ValueError: If no endpoint has that name.
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise ValueError(f"Unknown endpoint: '{name}'") from None
