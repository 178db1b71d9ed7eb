"""WeatherAPI.com passthrough client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from modules.weatherapi.endpoints import Endpoint, get_endpoint
from modules.weatherapi.errors import MissingParameterError, UpstreamError

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_CONTENT_TYPE = "application/json"

_REDACTED = "[REDACTED]"


@dataclass(frozen=True)
class UpstreamResponse:
    """An upstream reply, body kept as the raw bytes received."""

    status_code: int
    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class WeatherApiClient:
    """Forwards operations to WeatherAPI.com with the API key injected.

    The underlying ``httpx.AsyncClient`` is reused across calls. Pass one in
    to share a connection pool (or a mock transport in tests); otherwise the
    client creates and owns its own.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings, http_client: httpx.AsyncClient | None = None) -> WeatherApiClient:
        return cls(
            api_key=settings.weatherapi_key,
            base_url=settings.weatherapi_base_url,
            timeout=settings.weatherapi_timeout,
            http_client=http_client,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------

    def build_params(self, endpoint: Endpoint, params: dict[str, Any]) -> dict[str, Any]:
        """Return the upstream query for ``endpoint``, credential first.

        Raises:
            MissingParameterError: If a required parameter is absent or empty.
        """
        query: dict[str, Any] = {"key": self.api_key}
        for name in endpoint.required:
            value = params.get(name)
            if _is_missing(value):
                raise MissingParameterError(endpoint.name, name)
            query[name] = value
        for name, default in endpoint.optional.items():
            value = params.get(name)
            query[name] = default if value is None else value
        return query

    def build_url(self, endpoint_name: str, **params: Any) -> str:
        """Return the full upstream URL for an operation, without sending it."""
        endpoint = get_endpoint(endpoint_name)
        url = httpx.URL(f"{self.base_url}/{endpoint.path}", params=self.build_params(endpoint, params))
        return str(url)

    # ------------------------------------------------------------------
    # Forwarding
    # ------------------------------------------------------------------

    async def forward(self, endpoint_name: str, **params: Any) -> UpstreamResponse:
        """Issue one GET for ``endpoint_name`` and return the body untouched.

        Raises:
            ValueError: For an unknown endpoint name.
            MissingParameterError: Before any network I/O, if a required
                parameter is missing.
            UpstreamError: On a network failure or a non-2xx upstream status.
                No retry is attempted.
        """
        endpoint = get_endpoint(endpoint_name)
        query = self.build_params(endpoint, params)
        url = f"{self.base_url}/{endpoint.path}"

        logger.debug("weatherapi_request", endpoint=endpoint.name, url=url, params=_redact(query))

        try:
            resp = await self._http.get(url, params=query)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("weatherapi_http_error", endpoint=endpoint.name, status=status)
            raise UpstreamError(
                f"WeatherAPI error on '{endpoint.name}': {status}", status_code=status
            ) from None
        except httpx.RequestError as e:
            logger.error("weatherapi_request_error", endpoint=endpoint.name, error=_scrub(str(e), self.api_key))
            raise UpstreamError(
                f"Failed to connect to WeatherAPI for '{endpoint.name}': {type(e).__name__}"
            ) from None

        return UpstreamResponse(
            status_code=resp.status_code,
            content=resp.content,
            content_type=resp.headers.get("content-type", DEFAULT_CONTENT_TYPE),
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def current(self, q: str) -> UpstreamResponse:
        return await self.forward("current", q=q)

    async def forecast(self, q: str, days: int = 1) -> UpstreamResponse:
        return await self.forward("forecast", q=q, days=days)

    async def history(self, q: str, dt: str) -> UpstreamResponse:
        return await self.forward("history", q=q, dt=dt)

    async def alerts(self, q: str) -> UpstreamResponse:
        return await self.forward("alerts", q=q)

    async def marine(self, q: str) -> UpstreamResponse:
        return await self.forward("marine", q=q)

    async def future(self, q: str, dt: str) -> UpstreamResponse:
        return await self.forward("future", q=q, dt=dt)

    async def search(self, q: str) -> UpstreamResponse:
        return await self.forward("search", q=q)

    async def ip_lookup(self, q: str) -> UpstreamResponse:
        """``q`` is an IP address or ``auto:ip``."""
        return await self.forward("iplookup", q=q)

    async def astronomy(self, q: str, dt: str) -> UpstreamResponse:
        return await self.forward("astronomy", q=q, dt=dt)

    async def timezone(self, q: str) -> UpstreamResponse:
        return await self.forward("timezone", q=q)

    async def sports(self, q: str) -> UpstreamResponse:
        return await self.forward("sports", q=q)


def _redact(query: dict[str, Any]) -> dict[str, Any]:
    """Copy of an upstream query that is safe to log."""
    return {k: (_REDACTED if k == "key" else v) for k, v in query.items()}


def _scrub(text: str, secret: str) -> str:
    if not secret:
        return text
    return text.replace(secret, _REDACTED)
