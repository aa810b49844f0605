"""
RideWithGPS trips SDK functions.
"""

from typing import Any, Dict, Optional

from ridewithgps_mcp.sdk.client import RideWithGPSClient, page_params, require_positive
from ridewithgps_mcp.sdk.types import TRIP_ENDPOINT, TRIPS_ENDPOINT


def get_trips(client: RideWithGPSClient, page: Optional[int] = None) -> Dict[str, Any]:
    """
    Get one page of the user's trips, most recently updated first.

    GET trips.json

    Returns:
        {trips: [{id, name, distance, duration, departed_at, ...}], meta: {pagination}}
    """
    return client.make_request(TRIPS_ENDPOINT, params=page_params(page))


def get_trip(client: RideWithGPSClient, trip_id: int) -> Dict[str, Any]:
    """
    Get a trip with performance data and track points.

    GET trips/{id}.json

    Returns:
        {trip: {id, name, ..., avg_hr, avg_watts, track_points}}
    """
    trip_id = require_positive(trip_id, "id")
    return client.make_request(TRIP_ENDPOINT.format(id=trip_id))
