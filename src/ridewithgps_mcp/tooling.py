"""
Tool boundary for the RideWithGPS MCP server.

Every tool runs its API call through call_api(). Failures never escape as
raw exceptions: they become a ToolError carrying one readable line, which
FastMCP returns to the host as an error result. Arguments rejected by the
tool schema are reported the same way by ArgumentErrorMiddleware.
"""

import logging
from typing import Callable

import pydantic
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext

from ridewithgps_mcp.errors import (
    RenderingError,
    RideWithGPSError,
    TransportError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

READ_ONLY = {"readOnlyHint": True, "openWorldHint": True}


def format_error(error: Exception) -> str:
    """One-line, human readable description of a failure."""
    if isinstance(error, UpstreamError):
        message = f"RideWithGPS API Error ({error.status_code}): {error.reason or 'Request failed'}"
        excerpt = error.excerpt()
        if excerpt:
            message += f" - {excerpt}"
        return message
    if isinstance(error, TransportError):
        return f"Connection Error: could not reach RideWithGPS ({error})"
    if isinstance(error, ValidationError):
        return f"Validation Error: {error}"
    if isinstance(error, RenderingError):
        return f"Rendering Error: {error}"
    return f"Error: {error}"


def call_api(tool_name: str, fn: Callable[..., str], *args, **kwargs) -> str:
    """
    Run an api-layer call and contain any failure.

    Args:
        tool_name: Tool being served (for logs)
        fn: api function returning the rendered report

    Returns:
        The rendered report

    Raises:
        ToolError: For every failure, with a one-line message
    """
    try:
        return fn(*args, **kwargs)
    except RideWithGPSError as e:
        logger.warning(f"{tool_name} failed: {e}")
        raise ToolError(format_error(e)) from e
    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}")
        raise ToolError(format_error(e)) from e


def format_argument_errors(error: pydantic.ValidationError) -> str:
    """Collapse a pydantic argument error into a single Validation Error line."""
    problems = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail.get("loc", ()))
        problems.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return "Validation Error: " + "; ".join(problems)


class ArgumentErrorMiddleware(Middleware):
    """Report tool argument schema violations as one-line ToolErrors."""

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        try:
            return await call_next(context)
        except pydantic.ValidationError as e:
            logger.warning(f"{context.message.name} rejected arguments: {e.error_count()} error(s)")
            raise ToolError(format_argument_errors(e)) from e
