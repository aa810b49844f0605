"""
RideWithGPS users SDK functions.
"""

from typing import Any, Dict

from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.sdk.types import CURRENT_USER_ENDPOINT


def get_current_user(client: RideWithGPSClient) -> Dict[str, Any]:
    """
    Get the authenticated user's profile.

    GET users/current.json

    Returns:
        {user: {id, name, email, created_at, updated_at}}
    """
    return client.make_request(CURRENT_USER_ENDPOINT)
