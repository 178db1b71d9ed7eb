"""Exceptions raised by the WeatherAPI proxy."""

from __future__ import annotations


class WeatherApiError(Exception):
    """Base class for proxy failures."""


class MissingParameterError(WeatherApiError, ValueError):
    """A required query parameter was absent or empty."""

    def __init__(self, endpoint: str, parameter: str):
        self.endpoint = endpoint
        self.parameter = parameter
        super().__init__(f"Missing required parameter '{parameter}' for '{endpoint}'")


class UpstreamError(WeatherApiError):
    """The upstream call failed at the network level or returned a non-2xx status.

    ``status_code`` is the upstream status, or None when no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
