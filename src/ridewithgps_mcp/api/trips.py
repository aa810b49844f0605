"""
Trips: what have you ridden?

Recorded rides with duration, elevation and performance metrics.
"""

import logging
from typing import List, Optional

from ridewithgps_mcp.api.listing import empty_message, render_list
from ridewithgps_mcp.api.model import Page, TripDetail, TripSummary, detail_from_response
from ridewithgps_mcp.errors import RenderingError
from ridewithgps_mcp.sdk import trips as sdk_trips
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.utils import (
    format_date,
    format_distance,
    format_duration,
    format_elevation,
    format_location,
    or_unknown,
)

logger = logging.getLogger(__name__)

UNNAMED_TRIP = "Unnamed Trip"


def get_trips(client: RideWithGPSClient, page: Optional[int] = None) -> str:
    return render_trips(sdk_trips.get_trips(client, page=page))


def get_trip_details(client: RideWithGPSClient, trip_id: int) -> str:
    return render_trip_details(sdk_trips.get_trip(client, trip_id))


def render_trips(response) -> str:
    try:
        page = Page.from_response(response, "trips", TripSummary.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected trips payload: {e}")
        return empty_message("trip")
    return render_list(page, "trip", _trip_entry)


def _trip_entry(index: int, trip: TripSummary) -> List[str]:
    lines = [
        f"{index}. **{trip.name or UNNAMED_TRIP}** (ID: {or_unknown(trip.id)})",
        f"   Distance: {format_distance(trip.distance)}",
        f"   Duration: {format_duration(trip.duration)}",
    ]
    if trip.activity_type:
        lines.append(f"   Activity: {trip.activity_type}")
    lines.append(f"   Date: {format_date(trip.departed_at)}")
    return lines


def render_trip_details(response) -> str:
    """Full trip report. Performance lines only appear for non-zero metrics."""
    try:
        detail = detail_from_response(response, "trip", TripDetail.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected trip payload: {e}")
        detail = None
    if detail is None:
        return "Trip not found."

    trip = detail.summary
    lines = [
        f"**{trip.name or UNNAMED_TRIP}**",
        f"ID: {or_unknown(trip.id)}",
    ]
    if trip.description:
        lines.append(f"Description: {trip.description}")

    lines += [
        "",
        "**Trip Details:**",
        f"Activity Type: {or_unknown(trip.activity_type)}",
        f"Date: {format_date(trip.departed_at)}",
        f"Distance: {format_distance(trip.distance)}",
        f"Duration: {format_duration(trip.duration)}",
        f"Moving Time: {format_duration(trip.moving_time)}",
    ]
    if trip.avg_speed:
        lines.append(f"Average Speed: {trip.avg_speed:.1f} km/h")
    if trip.max_speed:
        lines.append(f"Max Speed: {trip.max_speed:.1f} km/h")

    lines += [
        "",
        "**Elevation:**",
        f"Gain: {format_elevation(trip.elevation_gain)}",
        f"Loss: {format_elevation(trip.elevation_loss)}",
    ]

    performance = []
    if trip.avg_hr:
        performance.append(f"Avg Heart Rate: {trip.avg_hr:g} bpm")
    if trip.max_hr:
        performance.append(f"Max Heart Rate: {trip.max_hr:g} bpm")
    if trip.avg_watts:
        performance.append(f"Avg Power: {trip.avg_watts:g}W")
    if trip.avg_cad:
        performance.append(f"Avg Cadence: {trip.avg_cad:g} rpm")
    if performance:
        lines += ["", "**Performance:**"] + performance

    if trip.calories:
        lines.append(f"Calories: {trip.calories:g}")

    lines += [
        "",
        "**Location:**",
        format_location(trip.locality, trip.administrative_area, trip.country_code),
    ]

    if detail.track_points:
        lines += ["", "**Track Data:**", f"Track points: {len(detail.track_points)}"]

    return "\n".join(lines)
