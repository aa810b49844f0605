"""
Shared pytest fixtures for RideWithGPS MCP testing.

HTTP is faked at the requests.Session level, so tool tests exercise the
whole path: FastMCP argument validation -> api -> sdk -> client.
"""
import json
import pytest
from unittest.mock import Mock, patch

from fastmcp import Client, FastMCP

from ridewithgps_mcp.config import Config
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import ArgumentErrorMiddleware


BASE_URL = "https://rwgps.test"


def fake_response(status_code=200, payload=None, reason="OK", text=None):
    """Build a requests.Response stand-in.

    With no payload, .json() raises ValueError like a non-JSON body would.
    """
    response = Mock(status_code=status_code, reason=reason)
    if payload is None:
        response.text = text or ""
        response.json = Mock(side_effect=ValueError("Expecting value"))
    else:
        response.text = text if text is not None else json.dumps(payload)
        response.json = Mock(return_value=payload)
    return response


def get_tool_result_text(result):
    """Extract text from the first content block of a tool result."""
    return result.content[0].text


def create_test_app(module, client):
    """
    Helper to create a FastMCP app with a single tool module registered
    and the same argument error handling as create_app().
    """
    app = FastMCP(f"Test RideWithGPS {module.__name__}")
    app.add_middleware(ArgumentErrorMiddleware())
    app = module.register_tools(app, client)
    return app


async def call_tool(app, name, arguments=None):
    """Call a tool through an in-memory MCP client without raising on errors."""
    async with Client(app) as client:
        return await client.call_tool(name, arguments or {}, raise_on_error=False)


@pytest.fixture
def config():
    return Config(api_key="test-key", auth_token="test-token", base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def rwgps_client(config):
    return RideWithGPSClient(config)


@pytest.fixture
def http_get(rwgps_client):
    """Patch the client's session GET. Doubles as the network-call counter."""
    with patch.object(rwgps_client._session, "get") as mock_get:
        mock_get.return_value = fake_response(200, {})
        yield mock_get


@pytest.fixture
def routes_payload():
    return {
        "routes": [
            {
                "id": 101,
                "name": "River Loop",
                "distance": 42195.0,
                "elevation_gain": 350.4,
                "locality": "Portland",
                "administrative_area": "OR",
                "country_code": "US",
                "updated_at": "2024-05-02T08:30:00Z",
            },
            {
                "id": 102,
                "name": "Hill Repeats",
                "distance": 12500.0,
                "locality": "Hood River",
                "administrative_area": "OR",
                "updated_at": "2024-04-20T17:00:00Z",
            },
        ],
        "meta": {
            "pagination": {
                "record_count": 42,
                "page_count": 21,
                "next_page_url": "https://ridewithgps.com/api/v1/routes.json?page=2",
            }
        },
    }


@pytest.fixture
def route_payload():
    return {
        "route": {
            "id": 101,
            "name": "River Loop",
            "description": "Flat loop along the river",
            "distance": 42195.0,
            "elevation_gain": 350.4,
            "elevation_loss": 348.6,
            "track_type": "loop",
            "terrain": "flat",
            "difficulty": "easy",
            "surface": "paved",
            "unpaved_pct": 5,
            "locality": "Portland",
            "administrative_area": "OR",
            "country_code": "US",
            "sw_lat": 45.45,
            "sw_lng": -122.75,
            "ne_lat": 45.6,
            "ne_lng": -122.6,
            "created_at": "2024-01-10T09:00:00Z",
            "updated_at": "2024-05-02T08:30:00Z",
            "track_points": [
                {"x": -122.70, "y": 45.50, "e": 20.0, "d": 0.0},
                {"x": -122.69, "y": 45.51, "e": 22.0, "d": 1200.0},
                {"x": -122.68, "y": 45.52, "e": 25.0, "d": 2400.0},
                {"x": -122.67, "y": 45.53, "e": 21.0, "d": 3600.0},
            ],
            "course_points": [
                {"x": -122.69, "y": 45.51, "d": 1200.0, "t": "Left", "n": "Turn left onto Main St"},
                {"x": -122.68, "y": 45.52, "d": 2400.0, "t": "Right", "n": "Turn right onto Bridge Rd"},
                {"x": -122.67, "y": 45.53, "d": 3600.0, "t": "Generic", "n": "Water stop"},
            ],
            "points_of_interest": [
                {"id": 7, "name": "Coffee Shop", "poi_type_name": "coffee", "lat": 45.515, "lng": -122.685},
                {"id": 8, "name": "Bike Shop", "poi_type_name": "bike_shop", "lat": 45.525, "lng": -122.675,
                 "description": "Open 8-18"},
            ],
        }
    }


@pytest.fixture
def trips_payload():
    return {
        "trips": [
            {
                "id": 501,
                "name": "Morning Ride",
                "activity_type": "cycling:road",
                "distance": 30500.0,
                "duration": 4500,
                "departed_at": "2024-05-01T06:15:00Z",
            },
        ],
        "meta": {"pagination": {"record_count": 1, "next_page_url": None}},
    }


@pytest.fixture
def trip_payload():
    return {
        "trip": {
            "id": 501,
            "name": "Morning Ride",
            "description": "Coffee ride",
            "activity_type": "cycling:road",
            "departed_at": "2024-05-01T06:15:00Z",
            "distance": 30500.0,
            "duration": 4500,
            "moving_time": 4200,
            "avg_speed": 26.14,
            "max_speed": 52.3,
            "elevation_gain": 310.2,
            "elevation_loss": 305.9,
            "avg_hr": 142,
            "max_hr": 171,
            "avg_watts": 185,
            "avg_cad": 88,
            "calories": 760,
            "locality": "Portland",
            "administrative_area": "OR",
            "country_code": "US",
            "track_points": [{"x": -122.7, "y": 45.5}, {"x": -122.69, "y": 45.51}],
        }
    }


@pytest.fixture
def events_payload():
    return {
        "events": [
            {
                "id": 9001,
                "name": "Gran Fondo",
                "starts_at": "2024-06-15T07:00:00Z",
                "ends_at": "2024-06-15T17:00:00Z",
                "created_at": "2024-02-01T12:00:00Z",
            },
            {
                "id": 9002,
                "name": "Club Ride",
                "starts_at": "2024-06-20T18:00:00Z",
                "created_at": "2024-01-15T12:00:00Z",
            },
        ],
        "meta": {"pagination": {"record_count": 2}},
    }


@pytest.fixture
def event_payload():
    return {
        "event": {
            "id": 9001,
            "name": "Gran Fondo",
            "description": "Annual charity ride",
            "starts_at": "2024-06-15T07:00:00Z",
            "ends_at": "2024-06-15T17:00:00Z",
            "created_at": "2024-02-01T12:00:00Z",
            "updated_at": "2024-03-01T12:00:00Z",
            "locality": "Bend",
            "administrative_area": "OR",
            "country_code": "US",
            "routes": [
                {"id": 201, "name": "Long Course", "distance": 160934.0, "locality": "Bend"},
                {"id": 202, "name": "Short Course", "distance": 80467.0},
            ],
        }
    }


@pytest.fixture
def user_payload():
    return {
        "user": {
            "id": 12345,
            "name": "Test Rider",
            "email": "rider@test.com",
            "created_at": "2019-03-04T10:00:00Z",
            "updated_at": "2024-05-01T10:00:00Z",
        }
    }


@pytest.fixture
def sync_payload():
    return {
        "items": [
            {
                "item_id": 101,
                "item_type": "route",
                "item_user_id": 12345,
                "action": "create",
                "datetime": "2024-01-02T10:00:00Z",
                "collection": {"id": 3, "name": "Favorites"},
            },
            {
                "item_id": 501,
                "item_type": "trip",
                "item_user_id": 12345,
                "action": "delete",
                "datetime": "2024-01-03T11:00:00Z",
            },
        ],
        "meta": {
            "rwgps_datetime": "2024-01-05T00:00:00Z",
            "next_sync_url": "https://ridewithgps.com/api/v1/sync.json?since=2024-01-05T00:00:00Z",
        },
    }
