"""Cloud discovery layer for gcpcache.

Submodules:
    client     -- DiscoveryClient ABC and the Google Cloud implementation.
    locations  -- LocationResolver: zone and region discovery for a project.
"""

from gcpcache.discovery.client import DiscoveryClient, GoogleDiscoveryClient, get_default_client
from gcpcache.discovery.locations import LocationResolver

__all__ = [
    "DiscoveryClient",
    "GoogleDiscoveryClient",
    "LocationResolver",
    "get_default_client",
]
