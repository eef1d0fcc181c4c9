"""Location discovery: every zone and region of a project."""

from __future__ import annotations

import structlog

from gcpcache.discovery.client import DiscoveryClient

_log = structlog.get_logger(component="discovery.locations")


class LocationResolver:
    """Produces the candidate location set for a project.

    Used only when a cache is constructed without an explicit location list.
    Errors from the discovery client propagate unchanged.
    """

    def __init__(self, client: DiscoveryClient) -> None:
        self._client = client

    def zones(self, project: str) -> list[str]:
        """Zone names in API order."""
        return self._client.zone_names(project)

    def resolve(self, project: str) -> list[str]:
        """Zones followed by regions, in API order, without deduplication."""
        zones = self._client.zone_names(project)
        regions = self._client.region_names(project)
        _log.info("locations_discovered", project=project, zones=len(zones), regions=len(regions))
        return zones + regions
