"""
RideWithGPS events SDK functions.
"""

from typing import Any, Dict, Optional

from ridewithgps_mcp.sdk.client import RideWithGPSClient, page_params, require_positive
from ridewithgps_mcp.sdk.types import EVENT_ENDPOINT, EVENTS_ENDPOINT


def get_events(client: RideWithGPSClient, page: Optional[int] = None) -> Dict[str, Any]:
    """
    Get one page of the user's events, newest first.

    GET events.json

    Returns:
        {events: [{id, name, starts_at, ends_at, created_at, ...}], meta: {pagination}}
    """
    return client.make_request(EVENTS_ENDPOINT, params=page_params(page))


def get_event(client: RideWithGPSClient, event_id: int) -> Dict[str, Any]:
    """
    Get an event with its associated routes.

    GET events/{id}.json

    Returns:
        {event: {id, name, ..., routes: [{id, name, distance, locality}]}}
    """
    event_id = require_positive(event_id, "id")
    return client.make_request(EVENT_ENDPOINT.format(id=event_id))
