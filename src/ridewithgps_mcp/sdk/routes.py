"""
RideWithGPS routes SDK functions.
"""

from typing import Any, Dict, Optional

from ridewithgps_mcp.sdk.client import RideWithGPSClient, page_params, require_positive
from ridewithgps_mcp.sdk.types import ROUTE_ENDPOINT, ROUTES_ENDPOINT


def get_routes(client: RideWithGPSClient, page: Optional[int] = None) -> Dict[str, Any]:
    """
    Get one page of the user's routes, most recently updated first.

    GET routes.json

    Returns:
        {routes: [{id, name, distance, locality, updated_at, ...}], meta: {pagination}}
    """
    return client.make_request(ROUTES_ENDPOINT, params=page_params(page))


def get_route(client: RideWithGPSClient, route_id: int) -> Dict[str, Any]:
    """
    Get a route with its track points, course points and points of interest.

    GET routes/{id}.json

    Returns:
        {route: {id, name, ..., track_points, course_points, points_of_interest}}
    """
    route_id = require_positive(route_id, "id")
    return client.make_request(ROUTE_ENDPOINT.format(id=route_id))
