"""
Routes: where can you ride?

Paginated route lists and full route details with cue sheet.
"""

import logging
from typing import List, Optional

from ridewithgps_mcp.api.listing import empty_message, render_list
from ridewithgps_mcp.api.model import (
    Page,
    RouteDetail,
    RouteSummary,
    detail_from_response,
)
from ridewithgps_mcp.errors import RenderingError
from ridewithgps_mcp.sdk import routes as sdk_routes
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.utils import (
    format_coordinates,
    format_date,
    format_distance,
    format_elevation,
    format_location,
    or_unknown,
)

logger = logging.getLogger(__name__)

UNNAMED_ROUTE = "Unnamed Route"


def get_routes(client: RideWithGPSClient, page: Optional[int] = None) -> str:
    """One page of the user's routes as a numbered text list."""
    return render_routes(sdk_routes.get_routes(client, page=page))


def get_route_details(client: RideWithGPSClient, route_id: int) -> str:
    """Full route report: metrics, location, track data, course points, POIs."""
    return render_route_details(sdk_routes.get_route(client, route_id))


def render_routes(response) -> str:
    try:
        page = Page.from_response(response, "routes", RouteSummary.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected routes payload: {e}")
        return empty_message("route")
    return render_list(page, "route", _route_entry)


def _route_entry(index: int, route: RouteSummary) -> List[str]:
    return [
        f"{index}. **{route.name or UNNAMED_ROUTE}** (ID: {or_unknown(route.id)})",
        f"   Distance: {format_distance(route.distance)}",
        f"   Location: {format_location(route.locality, route.administrative_area)}",
        f"   Updated: {format_date(route.updated_at)}",
    ]


def render_route_details(response) -> str:
    try:
        detail = detail_from_response(response, "route", RouteDetail.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected route payload: {e}")
        detail = None
    if detail is None:
        return "Route not found."

    route = detail.summary
    lines = [
        f"**{route.name or UNNAMED_ROUTE}**",
        f"ID: {or_unknown(route.id)}",
        f"Description: {route.description or 'No description'}",
        "",
        "**Route Details:**",
        f"Distance: {format_distance(route.distance)}",
        f"Elevation Gain: {format_elevation(route.elevation_gain)}",
        f"Elevation Loss: {format_elevation(route.elevation_loss)}",
        f"Track Type: {or_unknown(route.track_type)}",
        f"Terrain: {or_unknown(route.terrain)}",
        f"Difficulty: {or_unknown(route.difficulty)}",
        f"Surface: {or_unknown(route.surface)}",
    ]
    if route.unpaved_pct:
        lines.append(f"Unpaved: {route.unpaved_pct:g}%")

    lines += [
        "",
        "**Location:**",
        format_location(route.locality, route.administrative_area, route.country_code),
    ]
    if route.bounds is not None:
        b = route.bounds
        lines.append(
            f"Bounds: SW ({format_coordinates(b.sw_lat, b.sw_lng)}) "
            f"NE ({format_coordinates(b.ne_lat, b.ne_lng)})"
        )

    lines += [
        "",
        "**Timestamps:**",
        f"Created: {format_date(route.created_at)}",
        f"Updated: {format_date(route.updated_at)}",
    ]

    if detail.track_points:
        lines += ["", "**Track Data:**", f"Track points: {len(detail.track_points)}"]

    if detail.course_points:
        lines += ["", f"**Course Points ({len(detail.course_points)}):**"]
        for i, cp in enumerate(detail.course_points, start=1):
            label = cp.label or "Unnamed point"
            if cp.kind:
                label += f" [{cp.kind}]"
            lines.append(
                f"{i}. {label} - {format_distance(cp.distance)} along route "
                f"({format_coordinates(cp.lat, cp.lng)})"
            )

    if detail.points_of_interest:
        lines += ["", f"**Points of Interest ({len(detail.points_of_interest)}):**"]
        for i, poi in enumerate(detail.points_of_interest, start=1):
            kind = f" ({poi.kind})" if poi.kind else ""
            lines.append(
                f"{i}. {poi.name or 'Unnamed point'}{kind} at ({format_coordinates(poi.lat, poi.lng)})"
            )
            if poi.description:
                lines.append(f"   {poi.description}")

    return "\n".join(lines)
