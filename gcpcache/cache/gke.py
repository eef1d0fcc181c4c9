"""GKE cluster cache."""

from __future__ import annotations

from gcpcache.cache.resource_cache import ResourceCache
from gcpcache.models.resources import ResourceKind


class GKECache(ResourceCache):
    """Clusters per location.  Defaults to every zone and region of the project,
    since GKE clusters can be zonal or regional."""

    kind = ResourceKind.GKE_CLUSTER
    include_regions = True

    def _list_names(self, location: str) -> list[str]:
        return self._client.cluster_names(self.project, location)
