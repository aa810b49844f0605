"""
Startup configuration for the RideWithGPS MCP server.

Credentials are read once from the environment and handed to the client
explicitly. Missing credentials are fatal.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ridewithgps_mcp.errors import ConfigurationError


DEFAULT_BASE_URL = "https://ridewithgps.com"
DEFAULT_TIMEOUT = 30.0

API_KEY_VAR = "RWGPS_API_KEY"
AUTH_TOKEN_VAR = "RWGPS_AUTH_TOKEN"
BASE_URL_VAR = "RWGPS_BASE_URL"
TIMEOUT_VAR = "RWGPS_TIMEOUT"


@dataclass(frozen=True)
class Config:
    """Immutable API credentials and endpoint."""
    api_key: str
    auth_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        return f"Config(base_url={self.base_url!r}, timeout={self.timeout!r})"


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build a Config from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Config with credentials, base URL and request timeout

    Raises:
        ConfigurationError: If a credential is missing or the timeout is invalid
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_VAR, "").strip()
    auth_token = environ.get(AUTH_TOKEN_VAR, "").strip()

    missing = [
        name for name, value in ((API_KEY_VAR, api_key), (AUTH_TOKEN_VAR, auth_token))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"{' and '.join(missing)} environment variable"
            f"{'s are' if len(missing) > 1 else ' is'} required"
        )

    base_url = environ.get(BASE_URL_VAR, "").strip().rstrip("/") or DEFAULT_BASE_URL

    raw_timeout = environ.get(TIMEOUT_VAR, "").strip()
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(f"{TIMEOUT_VAR} must be a number, got '{raw_timeout}'")
        if timeout <= 0:
            raise ConfigurationError(f"{TIMEOUT_VAR} must be positive, got '{raw_timeout}'")

    return Config(
        api_key=api_key,
        auth_token=auth_token,
        base_url=base_url,
        timeout=timeout,
    )
