"""
RideWithGPS HTTP Client.

Handles HTTP transport, authentication headers and error mapping.
All endpoint-specific calls live in the sibling modules (routes, trips, etc.).
"""

import logging
from typing import Any, Dict, Optional

import requests

from ridewithgps_mcp.config import Config
from ridewithgps_mcp.errors import TransportError, UpstreamError, ValidationError
from ridewithgps_mcp.sdk.types import API_PREFIX

logger = logging.getLogger(__name__)


class RideWithGPSClient:
    """
    RideWithGPS API HTTP transport.

    Stateless across calls apart from the credentials it was built with.
    Every make_request() is exactly one GET round trip: no retries, no cache.
    """

    def __init__(self, config: Config):
        self._config = config
        self._api_url = f"{config.base_url.rstrip('/')}/{API_PREFIX}"
        self._session = requests.Session()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def api_url(self) -> str:
        return self._api_url

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-rwgps-api-key": self._config.api_key,
            "x-rwgps-auth-token": self._config.auth_token,
        }

    def make_request(self, endpoint: str, params: Dict = None) -> Dict[str, Any]:
        """
        Make an authenticated GET request.

        Args:
            endpoint: API endpoint path (e.g. "routes.json")
            params: Query parameters; omitted entirely when empty

        Returns:
            Decoded JSON body

        Raises:
            TransportError: If the API could not be reached
            UpstreamError: If the API returned a non-2xx status or a non-JSON body
        """
        url = f"{self._api_url}/{endpoint}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self._session.get(
                url,
                headers=self._headers(),
                params=params or None,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            raise UpstreamError(response.status_code, response.reason, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                response.status_code, "Response body is not valid JSON", response.text
            ) from e


def page_params(page: Optional[int]) -> Dict[str, str]:
    """Query parameters for a paginated list; empty when page is None."""
    if page is None:
        return {}
    return {"page": str(require_positive(page, "page"))}


def require_positive(value: int, name: str) -> int:
    """Reject anything that is not an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ValidationError(f"{name} must be >= 1, got {value}")
    return value
