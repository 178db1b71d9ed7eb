"""Canned WeatherAPI.com payloads for weatherapi module tests."""

from __future__ import annotations

API_KEY = "test-key-123"
BASE_URL = "https://api.weatherapi.com/v1"

# Kept as bytes with irregular spacing so any re-serialisation would show.
CURRENT_BODY = (
    b'{"location": {"name": "London", "region": "City of London, Greater London",'
    b' "country": "United Kingdom", "lat": 51.52, "lon": -0.11},'
    b'  "current": {"temp_c": 8.5, "condition": {"text": "Overcast", "code": 1009}}}'
)

FORECAST_BODY = (
    b'{"location":{"name":"London"},"current":{"temp_c":8.5},'
    b'"forecast":{"forecastday":[{"date":"2026-10-18","day":{"maxtemp_c":12.1,"mintemp_c":6.3}}]}}'
)

HISTORY_BODY = (
    b'{"location":{"name":"London"},'
    b'"forecast":{"forecastday":[{"date":"2026-10-01","day":{"avgtemp_c":13.4}}]}}'
)

SEARCH_BODY = (
    b'[{"id":2801268,"name":"London","region":"City of London, Greater London",'
    b'"country":"United Kingdom","lat":51.52,"lon":-0.11,"url":"london-city-of-london-greater-london-united-kingdom"}]'
)

IP_BODY = (
    b'{"ip":"8.8.8.8","type":"ipv4","continent_code":"NA","country_name":"United States",'
    b'"city":"Mountain View","tz_id":"America/Los_Angeles"}'
)

ERROR_BODY = b'{"error":{"code":1006,"message":"No matching location found."}}'

# route -> (params, upstream path)
ROUTES: dict[str, tuple[dict[str, str], str]] = {
    "/current": ({"q": "London"}, "current.json"),
    "/forecast": ({"q": "London", "days": "3"}, "forecast.json"),
    "/history": ({"q": "London", "dt": "2026-10-01"}, "history.json"),
    "/alerts": ({"q": "London"}, "alerts.json"),
    "/marine": ({"q": "50.2,-5.1"}, "marine.json"),
    "/future": ({"q": "London", "dt": "2026-12-01"}, "future.json"),
    "/search": ({"q": "Lond"}, "search.json"),
    "/iplookup": ({"q": "auto:ip"}, "ip.json"),
    "/astronomy": ({"q": "London", "dt": "2026-10-18"}, "astronomy.json"),
    "/timezone": ({"q": "London"}, "timezone.json"),
    "/sports": ({"q": "London"}, "sports.json"),
}
