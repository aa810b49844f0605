"""
Tests for the current user tool and error containment at the tool boundary.
"""

import pytest
import requests

from ridewithgps_mcp import profile
from tests.conftest import call_tool, create_test_app, fake_response, get_tool_result_text


@pytest.fixture
def app_with_profile(rwgps_client):
    return create_test_app(profile, rwgps_client)


@pytest.mark.asyncio
async def test_get_current_user(app_with_profile, http_get, user_payload):
    http_get.return_value = fake_response(200, user_payload)

    result = await call_tool(app_with_profile, "get_current_user")

    assert not result.is_error
    text = get_tool_result_text(result)
    assert text.startswith("**User Profile**")
    assert "Name: Test Rider" in text
    assert "User ID: 12345" in text
    assert http_get.call_args.args[0] == "https://rwgps.test/api/v1/users/current.json"


@pytest.mark.asyncio
async def test_get_current_user_unauthorized(app_with_profile, http_get):
    http_get.return_value = fake_response(
        401, reason="Unauthorized", text='{"error":"invalid token"}'
    )

    result = await call_tool(app_with_profile, "get_current_user")

    assert result.is_error
    assert len(result.content) == 1
    text = get_tool_result_text(result)
    assert "401" in text
    assert "invalid token" in text
    assert "\n" not in text


@pytest.mark.asyncio
async def test_get_current_user_connection_error(app_with_profile, http_get):
    http_get.side_effect = requests.ConnectionError("Connection refused")

    result = await call_tool(app_with_profile, "get_current_user")

    assert result.is_error
    text = get_tool_result_text(result)
    assert text.startswith("Connection Error")
    assert "Connection refused" in text


@pytest.mark.asyncio
async def test_get_current_user_timeout(app_with_profile, http_get):
    http_get.side_effect = requests.Timeout("read timed out")

    result = await call_tool(app_with_profile, "get_current_user")

    assert result.is_error
    assert "Connection Error" in get_tool_result_text(result)


@pytest.mark.asyncio
async def test_get_current_user_missing_user(app_with_profile, http_get):
    http_get.return_value = fake_response(200, {})

    result = await call_tool(app_with_profile, "get_current_user")

    assert not result.is_error
    assert get_tool_result_text(result) == "User information not found."
