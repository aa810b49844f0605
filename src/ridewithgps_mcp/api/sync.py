"""
Incremental sync: what changed since last time?

Validates the sync window, then renders the delta as a numbered change list
with the cursor to resume from.
"""

import logging
from typing import Optional

from ridewithgps_mcp.api.model import SyncDelta
from ridewithgps_mcp.errors import RenderingError, ValidationError
from ridewithgps_mcp.sdk import sync as sdk_sync
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.sdk.types import AssetType
from ridewithgps_mcp.utils import UNKNOWN, format_date, or_unknown, parse_timestamp

logger = logging.getLogger(__name__)

NO_CHANGES = "No changes found since the specified date."


def get_sync(client: RideWithGPSClient, since: str, assets: Optional[str] = None) -> str:
    """Changes to routes and/or trips since the given ISO-8601 datetime.

    Raises:
        ValidationError: If since or assets is malformed (no request is made)
    """
    since = validate_since(since)
    assets = normalize_assets(assets)
    return render_sync(sdk_sync.get_sync(client, since, assets))


def validate_since(since: str) -> str:
    """Check that since is an ISO-8601 datetime and return it trimmed."""
    text = (since or "").strip()
    if not text:
        raise ValidationError("since is required (ISO-8601, e.g. '2024-01-01T00:00:00Z')")
    if parse_timestamp(text) is None:
        raise ValidationError(
            f"since must be an ISO-8601 datetime (e.g. '2024-01-01T00:00:00Z'), got '{since}'"
        )
    return text


def normalize_assets(assets: Optional[str]) -> Optional[str]:
    """Validate a comma-separated asset list and return it canonicalized.

    "Trips, routes" -> "trips,routes". Empty input means no filter.
    """
    if assets is None:
        return None
    valid = {a.value for a in AssetType}
    parts = []
    for part in assets.split(","):
        name = part.strip().lower()
        if not name:
            continue
        if name not in valid:
            raise ValidationError(
                f"Invalid asset type '{part.strip()}'. Must be one of: {', '.join(sorted(valid))}"
            )
        if name not in parts:
            parts.append(name)
    return ",".join(parts) or None


def render_sync(response) -> str:
    try:
        delta = SyncDelta.from_response(response)
    except RenderingError as e:
        logger.warning(f"Unexpected sync payload: {e}")
        return NO_CHANGES
    if not delta.items:
        return NO_CHANGES

    lines = [f"Found {len(delta.items)} change(s) since sync:", ""]
    for i, item in enumerate(delta.items, start=1):
        action = (item.action or UNKNOWN).upper()
        lines.append(f"{i}. **{action}** {or_unknown(item.item_type)} (ID: {or_unknown(item.item_id)})")
        lines.append(f"   Date: {format_date(item.datetime)}")
        lines.append(f"   Owner: User {or_unknown(item.item_user_id)}")
        if item.collection_name:
            lines.append(f"   Collection: {item.collection_name}")
        lines.append("")

    if delta.next_sync_url:
        lines += [
            "**Next Sync:**",
            f"Use datetime: {or_unknown(delta.rwgps_datetime)}",
            f"Next sync URL: {delta.next_sync_url}",
        ]

    return "\n".join(lines).rstrip()
