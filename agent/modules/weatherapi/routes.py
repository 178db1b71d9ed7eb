"""Passthrough routes — one GET per WeatherAPI.com operation.

Every route returns the upstream body as received, with the upstream status
and content type. Missing parameters are rejected by query validation before
the upstream is contacted.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from modules.weatherapi.client import UpstreamResponse, WeatherApiClient
from modules.weatherapi.endpoints import ENDPOINTS
from shared.schemas.common import ErrorResponse

router = APIRouter(tags=["weather"])

_JSON_BODY = {"content": {"application/json": {}}}
_ERRORS = {
    400: {"model": ErrorResponse, "description": "Empty required parameter"},
    502: {"model": ErrorResponse, "description": "Upstream failure"},
}

Q_LOCATION = "Location query (city name, lat/lon, zip, etc.)"
DT_DATE = "Date (yyyy-MM-dd)"


def get_client(request: Request) -> WeatherApiClient:
    """Return the client created at startup."""
    return request.app.state.weatherapi


def _passthrough(upstream: UpstreamResponse) -> Response:
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )


def _route(name: str) -> dict:
    endpoint = ENDPOINTS[name]
    return {
        "summary": endpoint.summary,
        "description": f"Forwards to WeatherAPI.com `{endpoint.path}` and returns its JSON body unchanged.",
        "response_class": Response,
        "responses": {200: _JSON_BODY, **_ERRORS},
    }


@router.get("/current", **_route("current"))
async def current(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.current(q))


@router.get("/forecast", **_route("forecast"))
async def forecast(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    days: int = Query(1, description="Number of forecast days (1-14)"),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.forecast(q, days))


@router.get("/history", **_route("history"))
async def history(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    dt: str = Query(..., min_length=1, description=DT_DATE),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.history(q, dt))


@router.get("/alerts", **_route("alerts"))
async def alerts(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.alerts(q))


@router.get("/marine", **_route("marine"))
async def marine(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.marine(q))


@router.get("/future", **_route("future"))
async def future(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    dt: str = Query(..., min_length=1, description=DT_DATE),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.future(q, dt))


@router.get("/search", **_route("search"))
async def search(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.search(q))


@router.get("/iplookup", **_route("iplookup"))
async def ip_lookup(
    q: str = Query(..., min_length=1, description="IP address or 'auto:ip'"),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.ip_lookup(q))


@router.get("/astronomy", **_route("astronomy"))
async def astronomy(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    dt: str = Query(..., min_length=1, description=DT_DATE),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.astronomy(q, dt))


@router.get("/timezone", **_route("timezone"))
async def timezone(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.timezone(q))


@router.get("/sports", **_route("sports"))
async def sports(
    q: str = Query(..., min_length=1, description=Q_LOCATION),
    client: WeatherApiClient = Depends(get_client),
):
    return _passthrough(await client.sports(q))
