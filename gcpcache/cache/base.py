"""Project and location scope shared by every resource cache."""

from __future__ import annotations

from collections.abc import Sequence

from gcpcache.discovery.client import DiscoveryClient, get_default_client
from gcpcache.discovery.locations import LocationResolver


class BaseCache:
    """Holds the project id and the effective location set.

    An empty location list, or one whose entries are all blank, is replaced
    by the discovered locations of the project.  Any other list is used
    verbatim: entries are not validated and blanks mixed with real locations
    are kept.
    """

    include_regions = True

    def __init__(
        self,
        project: str = "",
        locations: Sequence[str | None] | None = None,
        *,
        client: DiscoveryClient | None = None,
        resolver: LocationResolver | None = None,
    ) -> None:
        self._project = project
        self._client = client if client is not None else get_default_client()
        self._resolver = resolver if resolver is not None else LocationResolver(self._client)
        self._locations: tuple[str, ...] = self._select_locations(locations or [])

    @property
    def project(self) -> str:
        return self._project

    @property
    def locations(self) -> tuple[str, ...]:
        return self._locations

    def _select_locations(self, requested: Sequence[str | None]) -> tuple[str, ...]:
        if any(requested):
            return tuple(loc or "" for loc in requested)
        return tuple(self._discover_locations())

    def _discover_locations(self) -> list[str]:
        if self.include_regions:
            return self._resolver.resolve(self._project)
        return self._resolver.zones(self._project)
