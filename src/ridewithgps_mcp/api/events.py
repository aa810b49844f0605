"""
Events: what's on the calendar?

Organized rides and the routes attached to them.
"""

import logging
from typing import List, Optional

from ridewithgps_mcp.api.listing import empty_message, render_list
from ridewithgps_mcp.api.model import EventDetail, EventSummary, Page, detail_from_response
from ridewithgps_mcp.errors import RenderingError
from ridewithgps_mcp.sdk import events as sdk_events
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.utils import format_date, format_distance, format_location, or_unknown

logger = logging.getLogger(__name__)

UNNAMED_EVENT = "Unnamed Event"


def get_events(client: RideWithGPSClient, page: Optional[int] = None) -> str:
    return render_events(sdk_events.get_events(client, page=page))


def get_event_details(client: RideWithGPSClient, event_id: int) -> str:
    return render_event_details(sdk_events.get_event(client, event_id))


def render_events(response) -> str:
    try:
        page = Page.from_response(response, "events", EventSummary.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected events payload: {e}")
        return empty_message("event")
    return render_list(page, "event", _event_entry)


def _event_entry(index: int, event: EventSummary) -> List[str]:
    lines = [
        f"{index}. **{event.name or UNNAMED_EVENT}** (ID: {or_unknown(event.id)})",
        f"   Starts: {format_date(event.starts_at)}",
    ]
    if event.ends_at:
        lines.append(f"   Ends: {format_date(event.ends_at)}")
    lines.append(f"   Created: {format_date(event.created_at)}")
    return lines


def render_event_details(response) -> str:
    try:
        detail = detail_from_response(response, "event", EventDetail.from_dict)
    except RenderingError as e:
        logger.warning(f"Unexpected event payload: {e}")
        detail = None
    if detail is None:
        return "Event not found."

    event = detail.summary
    lines = [
        f"**{event.name or UNNAMED_EVENT}**",
        f"ID: {or_unknown(event.id)}",
    ]
    if event.description:
        lines.append(f"Description: {event.description}")

    lines += ["", "**Event Details:**", f"Starts: {format_date(event.starts_at)}"]
    if event.ends_at:
        lines.append(f"Ends: {format_date(event.ends_at)}")
    lines += [
        f"Created: {format_date(event.created_at)}",
        f"Updated: {format_date(event.updated_at)}",
    ]

    if event.locality or event.administrative_area or event.country_code:
        lines += [
            "",
            "**Location:**",
            format_location(event.locality, event.administrative_area, event.country_code),
        ]

    if detail.routes:
        lines += ["", f"**Associated Routes ({len(detail.routes)}):**"]
        for i, route in enumerate(detail.routes, start=1):
            lines.append(f"{i}. {route.name or 'Unnamed Route'} (ID: {or_unknown(route.id)})")
            lines.append(f"   Distance: {format_distance(route.distance)}")
            if route.locality:
                lines.append(f"   Location: {route.locality}")

    return "\n".join(lines)
