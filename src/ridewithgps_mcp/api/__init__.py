"""
High-Level API: text reports over the RideWithGPS SDK.

Every get_* function makes one SDK call and returns a report string the
assistant can read. The matching render_* functions are pure and can be
applied to any decoded response.

Modules:
    routes : Where can you ride?       (route list, route details)
    trips  : What have you ridden?     (trip list, trip details)
    events : What's on the calendar?   (event list, event details)
    users  : Who is signed in?         (current user)
    sync   : What changed?             (incremental sync delta)
"""

# Routes
from ridewithgps_mcp.api.routes import (
    get_routes,
    get_route_details,
    render_routes,
    render_route_details,
)

# Trips
from ridewithgps_mcp.api.trips import (
    get_trips,
    get_trip_details,
    render_trips,
    render_trip_details,
)

# Events
from ridewithgps_mcp.api.events import (
    get_events,
    get_event_details,
    render_events,
    render_event_details,
)

# User
from ridewithgps_mcp.api.users import get_current_user, render_user

# Sync
from ridewithgps_mcp.api.sync import get_sync, render_sync, validate_since, normalize_assets

__all__ = [
    "get_routes", "get_route_details", "render_routes", "render_route_details",
    "get_trips", "get_trip_details", "render_trips", "render_trip_details",
    "get_events", "get_event_details", "render_events", "render_event_details",
    "get_current_user", "render_user",
    "get_sync", "render_sync", "validate_since", "normalize_assets",
]
