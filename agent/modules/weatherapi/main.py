"""WeatherAPI proxy — FastAPI service."""

from __future__ import annotations

import logging

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from modules.weatherapi.client import WeatherApiClient
from modules.weatherapi.errors import MissingParameterError, UpstreamError, WeatherApiError
from modules.weatherapi.manifest import MANIFEST
from modules.weatherapi.routes import router
from modules.weatherapi.tools import WeatherApiTools
from shared.config import Settings, get_settings
from shared.schemas.common import HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

settings = get_settings()

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()
app = FastAPI(
    title="WeatherAPI Proxy",
    version="1.0.0",
    description="Forwards requests to WeatherAPI.com and relays the JSON response unchanged.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def include_proxy_routes(target: FastAPI, config: Settings) -> None:
    """Mount the passthrough routes at the configured prefix."""
    target.include_router(router, prefix=config.route_prefix)


include_proxy_routes(app, settings)

tools: WeatherApiTools | None = None


@app.on_event("startup")
async def startup():
    global tools
    if not settings.weatherapi_key:
        logger.warning(
            "weatherapi_key_missing",
            hint="Set WEATHERAPI_KEY in .env; upstream calls will be rejected",
        )

    http_client = httpx.AsyncClient(timeout=settings.weatherapi_timeout)
    client = WeatherApiClient.from_settings(settings, http_client=http_client)
    app.state.http_client = http_client
    app.state.weatherapi = client
    tools = WeatherApiTools(client)
    logger.info(
        "weatherapi_module_ready",
        base_url=settings.weatherapi_base_url,
        route_prefix=settings.route_prefix or "/",
    )


@app.on_event("shutdown")
async def shutdown():
    http_client = getattr(app.state, "http_client", None)
    if http_client is not None:
        await http_client.aclose()


@app.exception_handler(MissingParameterError)
async def missing_parameter_handler(request: Request, exc: MissingParameterError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    # Upstream body is never relayed on failure.
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/manifest", response_model=ModuleManifest)
async def manifest():
    """Return the module manifest."""
    return MANIFEST


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall):
    """Execute a tool call."""
    if tools is None:
        return ToolResult(tool_name=call.tool_name, success=False, error="Module not ready")

    if not tools.has_tool(call.tool_name):
        return ToolResult(
            tool_name=call.tool_name,
            success=False,
            error=f"Unknown tool: {call.tool_name}",
        )

    try:
        result = await tools.run(call.tool_name, dict(call.arguments))
        return ToolResult(tool_name=call.tool_name, success=True, result=result)
    except WeatherApiError as e:
        # Traceback omitted: messages are built without the credential.
        logger.warning("tool_execution_error", tool=call.tool_name, error=str(e))
        return ToolResult(tool_name=call.tool_name, success=False, error=str(e))
    except Exception as e:
        logger.error("tool_execution_error", tool=call.tool_name, error=str(e), exc_info=True)
        return ToolResult(tool_name=call.tool_name, success=False, error=str(e))


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
