"""WeatherAPI module manifest — tool definitions."""

from modules.weatherapi.endpoints import ENDPOINTS
from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_PARAMETERS: dict[str, ToolParameter] = {
    "q": ToolParameter(
        name="q",
        type="string",
        description="Location query: city name, 'lat,lon', postcode, or 'auto:ip'",
    ),
    "dt": ToolParameter(
        name="dt",
        type="string",
        description="Date in yyyy-MM-dd format",
    ),
    "days": ToolParameter(
        name="days",
        type="integer",
        description="Number of forecast days (1-14). Default: 1",
        required=False,
        default=1,
    ),
}

_IP_QUERY = ToolParameter(
    name="q",
    type="string",
    description="IP address (IPv4 or IPv6) or 'auto:ip' for the caller's address",
)


def _tool(name: str) -> ToolDefinition:
    endpoint = ENDPOINTS[name]
    params = [_PARAMETERS[p] for p in endpoint.parameters]
    if name == "iplookup":
        params = [_IP_QUERY]
    return ToolDefinition(
        name=f"weatherapi.{name}",
        description=f"{endpoint.summary}. Returns the raw WeatherAPI.com JSON.",
        parameters=params,
    )


MANIFEST = ModuleManifest(
    module_name="weatherapi",
    description=(
        "Current conditions, forecasts, history, alerts, marine, astronomy, "
        "time zone, sports and location lookups from WeatherAPI.com."
    ),
    tools=[_tool(name) for name in ENDPOINTS],
)
