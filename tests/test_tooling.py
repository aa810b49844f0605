"""Tests for the tool boundary: error formatting and containment."""

import pytest
import pydantic
from fastmcp.exceptions import ToolError

from ridewithgps_mcp.errors import (
    RenderingError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from ridewithgps_mcp.tooling import call_api, format_argument_errors, format_error


class TestFormatError:
    def test_upstream_includes_status_and_body(self):
        error = UpstreamError(401, "Unauthorized", '{"error":"invalid token"}')
        assert format_error(error) == (
            'RideWithGPS API Error (401): Unauthorized - {"error":"invalid token"}'
        )

    def test_upstream_body_is_single_line_excerpt(self):
        error = UpstreamError(500, "Internal Server Error", "<html>\n" + "x" * 500 + "\n</html>")
        message = format_error(error)
        assert "\n" not in message
        assert message.endswith("...")
        assert len(message) < 300

    def test_upstream_without_body(self):
        assert format_error(UpstreamError(404, "Not Found")) == "RideWithGPS API Error (404): Not Found"

    def test_transport(self):
        message = format_error(TransportError("Connection refused"))
        assert message.startswith("Connection Error:")
        assert "Connection refused" in message

    def test_validation(self):
        assert format_error(ValidationError("id must be >= 1, got 0")) == (
            "Validation Error: id must be >= 1, got 0"
        )

    def test_rendering(self):
        assert format_error(RenderingError("bad shape")).startswith("Rendering Error:")

    def test_unexpected(self):
        assert format_error(KeyError("boom")) == "Error: 'boom'"


class TestCallApi:
    def test_returns_report(self):
        assert call_api("t", lambda x: f"report {x}", 1) == "report 1"

    def test_known_error_becomes_tool_error(self):
        def fail():
            raise UpstreamError(503, "Service Unavailable", "down")

        with pytest.raises(ToolError, match=r"RideWithGPS API Error \(503\)"):
            call_api("t", fail)

    def test_unexpected_error_becomes_tool_error(self):
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(ToolError, match="Error: boom"):
            call_api("t", fail)


class _Arguments(pydantic.BaseModel):
    id: int = pydantic.Field(ge=1, strict=True)


class TestFormatArgumentErrors:
    def _error(self, **arguments):
        with pytest.raises(pydantic.ValidationError) as exc:
            _Arguments(**arguments)
        return exc.value

    def test_single_line_with_location(self):
        message = format_argument_errors(self._error(id=0))
        assert message.startswith("Validation Error: id: ")
        assert "\n" not in message

    def test_missing_field(self):
        assert format_argument_errors(self._error()) == "Validation Error: id: Field required"

    def test_strict_integer(self):
        assert format_argument_errors(self._error(id="5")) == (
            "Validation Error: id: Input should be a valid integer"
        )
