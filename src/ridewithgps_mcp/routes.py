"""
Route tools for RideWithGPS MCP server.

Delegates to api.routes for fetching and rendering.
"""

from typing import Annotated, Optional

from pydantic import Field

from ridewithgps_mcp.api import routes as api_routes
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import READ_ONLY, call_api


def register_tools(app, client: RideWithGPSClient):
    """Register route tools with the MCP app."""

    @app.tool(title="Get User Routes", annotations=READ_ONLY, output_schema=None)
    async def get_routes(
        page: Annotated[
            Optional[int],
            Field(ge=1, strict=True, description="Page number for pagination (starts at 1, optional)"),
        ] = None,
    ) -> str:
        """
        Retrieve a paginated list of routes owned by the authenticated user,
        ordered by updated_at descending.
        """
        return call_api("get_routes", api_routes.get_routes, client, page=page)

    @app.tool(title="Get Route Details", annotations=READ_ONLY, output_schema=None)
    async def get_route_details(
        id: Annotated[int, Field(ge=1, strict=True, description="The unique ID of the route to retrieve")],
    ) -> str:
        """
        Retrieve full details for a specific route including track points,
        course points, and points of interest.
        """
        return call_api("get_route_details", api_routes.get_route_details, client, id)

    return app
