"""
Error taxonomy for the RideWithGPS MCP server.

ConfigurationError is fatal at startup. Everything else is contained at the
tool boundary and reported to the host as an error result.
"""

from typing import Optional


class RideWithGPSError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(RideWithGPSError):
    """Required configuration is missing or invalid."""


class ValidationError(RideWithGPSError):
    """Tool or client input was rejected before any request was made."""


class TransportError(RideWithGPSError):
    """The upstream API could not be reached (DNS, refused, timeout...)."""


class UpstreamError(RideWithGPSError):
    """The upstream API answered with a non-success response."""

    def __init__(self, status_code: int, reason: Optional[str], body: str = ""):
        self.status_code = status_code
        self.reason = reason or ""
        self.body = body or ""
        super().__init__(f"API request failed: {status_code} {self.reason}".rstrip())

    def excerpt(self, limit: int = 200) -> str:
        """Single-line prefix of the response body, for diagnostics."""
        text = " ".join(self.body.split())
        if len(text) > limit:
            return text[:limit] + "..."
        return text


class RenderingError(RideWithGPSError):
    """An upstream payload did not have the expected shape."""
