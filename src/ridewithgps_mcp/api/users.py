"""
User profile: who is signed in?
"""

import logging

from ridewithgps_mcp.api.model import User, detail_from_response
from ridewithgps_mcp.errors import RenderingError
from ridewithgps_mcp.sdk import users as sdk_users
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.utils import format_date, or_unknown

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"


def get_current_user(client: RideWithGPSClient) -> str:
    return render_user(sdk_users.get_current_user(client))


def render_user(response) -> str:
    try:
        user = detail_from_response(response, "user", User.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected user payload: {e}")
        user = None
    if user is None:
        return "User information not found."

    return "\n".join([
        "**User Profile**",
        f"Name: {user.name or NOT_PROVIDED}",
        f"Email: {user.email or NOT_PROVIDED}",
        f"User ID: {or_unknown(user.id)}",
        f"Member since: {format_date(user.created_at)}",
        f"Last updated: {format_date(user.updated_at)}",
    ])
