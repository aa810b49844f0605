"""
RideWithGPS Low-Level SDK.

Thin wrapper over the RideWithGPS HTTP API.
Each function maps 1:1 to an API endpoint and returns the decoded JSON body.
"""

from ridewithgps_mcp.sdk.client import RideWithGPSClient
from ridewithgps_mcp.sdk.types import AssetType

__all__ = [
    "RideWithGPSClient",
    "AssetType",
]
