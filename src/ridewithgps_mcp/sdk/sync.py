"""
RideWithGPS incremental sync SDK functions.
"""

from typing import Any, Dict, Optional

from ridewithgps_mcp.errors import ValidationError
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.sdk.types import SYNC_ENDPOINT


def get_sync(
    client: RideWithGPSClient,
    since: str,
    assets: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get items the user has interacted with since a given datetime.

    GET sync.json

    Args:
        since: ISO-8601 datetime, always sent
        assets: Comma-joined asset types ("routes", "trips"), sent only when given

    Returns:
        {items: [{action, item_type, item_id, item_user_id, datetime, collection}],
         meta: {rwgps_datetime, next_sync_url}}
    """
    if not since:
        raise ValidationError("since is required")
    params = {"since": since}
    if assets:
        params["assets"] = assets
    return client.make_request(SYNC_ENDPOINT, params=params)
