"""
Event tools for RideWithGPS MCP server.

Delegates to api.events for fetching and rendering.
"""

from typing import Annotated, Optional

from pydantic import Field

from ridewithgps_mcp.api import events as api_events
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import READ_ONLY, call_api


def register_tools(app, client: RideWithGPSClient):
    """Register event tools with the MCP app."""

    @app.tool(title="Get User Events", annotations=READ_ONLY, output_schema=None)
    async def get_events(
        page: Annotated[
            Optional[int],
            Field(ge=1, strict=True, description="Page number for pagination (starts at 1, optional)"),
        ] = None,
    ) -> str:
        """
        Retrieve a paginated list of events owned by the authenticated user,
        ordered by created_at descending.
        """
        return call_api("get_events", api_events.get_events, client, page=page)

    @app.tool(title="Get Event Details", annotations=READ_ONLY, output_schema=None)
    async def get_event_details(
        id: Annotated[int, Field(ge=1, strict=True, description="The unique ID of the event to retrieve")],
    ) -> str:
        """
        Retrieve full details for a specific event including associated routes.
        """
        return call_api("get_event_details", api_events.get_event_details, client, id)

    return app
