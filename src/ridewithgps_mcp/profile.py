"""
User profile tool for RideWithGPS MCP server.
"""

from ridewithgps_mcp.api import users as api_users
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import READ_ONLY, call_api


def register_tools(app, client: RideWithGPSClient):
    """Register profile tools with the MCP app."""

    @app.tool(title="Get Current User", annotations=READ_ONLY, output_schema=None)
    async def get_current_user() -> str:
        """
        Retrieve profile information for the authenticated user.
        """
        return call_api("get_current_user", api_users.get_current_user, client)

    return app
