"""
MCP Server for RideWithGPS

Exposes the RideWithGPS API (routes, trips, events, current user and
incremental sync) as read-only tools via the Model Context Protocol (MCP).

Requires RWGPS_API_KEY and RWGPS_AUTH_TOKEN in the environment.

Supports two transport modes:
- stdio: For local usage from an MCP host (default)
- http: For running as a network service
"""

import logging
import os
import sys

from fastmcp import FastMCP

from ridewithgps_mcp import events, profile, routes, sync, trips
from ridewithgps_mcp.config import Config, load_config
from ridewithgps_mcp.errors import ConfigurationError
from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.tooling import ArgumentErrorMiddleware

logger = logging.getLogger(__name__)

SERVER_NAME = "ridewithgps-mcp"
__version__ = "0.1.0"


def create_app(config: Config = None) -> FastMCP:
    """Create and configure the MCP app with all tools registered.

    Raises:
        ConfigurationError: If config is omitted and the environment lacks credentials
    """
    if config is None:
        config = load_config()

    client = RideWithGPSClient(config)

    app = FastMCP(SERVER_NAME)
    app.add_middleware(ArgumentErrorMiddleware())

    app = routes.register_tools(app, client)
    app = trips.register_tools(app, client)
    app = profile.register_tools(app, client)
    app = events.register_tools(app, client)
    app = sync.register_tools(app, client)

    return app


def configure_logging() -> None:
    """Send all log output to stderr; stdout carries the stdio protocol."""
    level = os.environ.get("RWGPS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - RWGPS_API_KEY, RWGPS_AUTH_TOKEN: API credentials (required)
    - RWGPS_BASE_URL: API base URL (default: https://ridewithgps.com)
    - RWGPS_TIMEOUT: Request timeout in seconds (default: 30)
    - RWGPS_LOG_LEVEL: Log level (default: INFO)
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    configure_logging()

    try:
        app = create_app()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        logger.info(f"Starting RideWithGPS MCP server on http://{host}:{port}/mcp")
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
