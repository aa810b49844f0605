"""
RideWithGPS API types, enums, and constants.

Endpoint paths and enumerated values accepted or returned by the API.
"""

from enum import Enum


API_PREFIX = "api/v1"

ROUTES_ENDPOINT = "routes.json"
ROUTE_ENDPOINT = "routes/{id}.json"
TRIPS_ENDPOINT = "trips.json"
TRIP_ENDPOINT = "trips/{id}.json"
EVENTS_ENDPOINT = "events.json"
EVENT_ENDPOINT = "events/{id}.json"
CURRENT_USER_ENDPOINT = "users/current.json"
SYNC_ENDPOINT = "sync.json"


class AssetType(Enum):
    """Asset kinds the sync endpoint can be restricted to."""
    ROUTES = "routes"
    TRIPS = "trips"

