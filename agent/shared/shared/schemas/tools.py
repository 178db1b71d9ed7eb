"""Tool and module manifest schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ToolParameter(BaseModel):
    """One argument accepted by a tool."""

    name: str
    type: str  # string, integer
    description: str
    required: bool = True
    default: Any = None


class ToolDefinition(BaseModel):
    """A single tool exposed by a module."""

    name: str  # e.g. "weatherapi.forecast"
    description: str
    parameters: list[ToolParameter]


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Result from a tool execution."""

    tool_name: str
    success: bool
    result: Any = None
    error: str | None = None
