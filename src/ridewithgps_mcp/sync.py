"""
Sync tool for RideWithGPS MCP server.

Incremental change feed for keeping a remote copy of the user's library.
"""

from typing import Annotated, Optional

from pydantic import Field

from ridewithgps_mcp.api import sync as api_sync
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import READ_ONLY, call_api


def register_tools(app, client: RideWithGPSClient):
    """Register sync tools with the MCP app."""

    @app.tool(title="Sync User Data", annotations=READ_ONLY, output_schema=None)
    async def sync_user_data(
        since: Annotated[
            str,
            Field(description="ISO8601 formatted datetime (e.g., '2024-01-01T00:00:00Z') to get changes since"),
        ],
        assets: Annotated[
            Optional[str],
            Field(
                description="Comma-separated list of asset types to return: 'routes', 'trips', "
                "or 'routes,trips' (optional, defaults to API client setting)"
            ),
        ] = None,
    ) -> str:
        """
        Retrieve items (routes and/or trips) that the user has interacted with
        since a given datetime. Useful for maintaining remote copies of user
        libraries.
        """
        return call_api("sync_user_data", api_sync.get_sync, client, since, assets)

    return app
