"""
Live API test fixtures.

These tests hit the REAL RideWithGPS API to check that response shapes
still match what the renderers expect. They require credentials.

Provide credentials via environment variables:
  RWGPS_API_KEY     = API client key
  RWGPS_AUTH_TOKEN  = user auth token
  RWGPS_BASE_URL    = https://ridewithgps.com (default)

Run: pytest tests/live/ -v
"""

import os

import pytest


DEFAULT_BASE_URL = "https://ridewithgps.com"


@pytest.fixture(scope="session")
def rwgps_creds():
    """
    Returns dict with keys: api_key, auth_token, base_url.
    Skips all live tests if no credentials are available.
    """
    api_key = os.environ.get("RWGPS_API_KEY")
    auth_token = os.environ.get("RWGPS_AUTH_TOKEN")
    if not (api_key and auth_token):
        pytest.skip("No RideWithGPS credentials: set RWGPS_API_KEY and RWGPS_AUTH_TOKEN")
    return {
        "api_key": api_key,
        "auth_token": auth_token,
        "base_url": os.environ.get("RWGPS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
    }


@pytest.fixture(scope="session")
def auth_headers(rwgps_creds):
    """Standard auth headers for RideWithGPS API calls."""
    return {
        "Content-Type": "application/json",
        "x-rwgps-api-key": rwgps_creds["api_key"],
        "x-rwgps-auth-token": rwgps_creds["auth_token"],
    }


@pytest.fixture(scope="session")
def api_url(rwgps_creds):
    return f"{rwgps_creds['base_url']}/api/v1"
