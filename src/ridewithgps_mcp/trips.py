"""
Trip tools for RideWithGPS MCP server.

Delegates to api.trips for fetching and rendering.
"""

from typing import Annotated, Optional

from pydantic import Field

from ridewithgps_mcp.api import trips as api_trips
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import READ_ONLY, call_api


def register_tools(app, client: RideWithGPSClient):
    """Register trip tools with the MCP app."""

    @app.tool(title="Get User Trips", annotations=READ_ONLY, output_schema=None)
    async def get_trips(
        page: Annotated[
            Optional[int],
            Field(ge=1, strict=True, description="Page number for pagination (starts at 1, optional)"),
        ] = None,
    ) -> str:
        """
        Retrieve a paginated list of trips owned by the authenticated user,
        ordered by updated_at descending.
        """
        return call_api("get_trips", api_trips.get_trips, client, page=page)

    @app.tool(title="Get Trip Details", annotations=READ_ONLY, output_schema=None)
    async def get_trip_details(
        id: Annotated[int, Field(ge=1, strict=True, description="The unique ID of the trip to retrieve")],
    ) -> str:
        """
        Retrieve full details for a specific trip including track points and
        performance data.
        """
        return call_api("get_trip_details", api_trips.get_trip_details, client, id)

    return app
