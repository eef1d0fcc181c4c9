"""GCE instance cache."""

from __future__ import annotations

from gcpcache.cache.resource_cache import ResourceCache
from gcpcache.models.resources import ResourceKind


class GCECache(ResourceCache):
    """Instances per zone.  Defaults to every zone of the project."""

    kind = ResourceKind.GCE_INSTANCE
    include_regions = False

    def _list_names(self, location: str) -> list[str]:
        return self._client.instance_names(self.project, location)
