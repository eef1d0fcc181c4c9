"""Cache layer for gcpcache.

Memoizes GCE instance and GKE cluster inventories so repeated compliance
checks against a project do not repeat the same enumeration calls.

Submodules:
    base            -- BaseCache: project id and location fallback policy.
    registry        -- CacheRegistry: owner of every shared CacheState.
    resource_cache  -- ResourceCache: fill-once enumeration of one kind.
    gke             -- GKECache: clusters over zones and regions.
    gce             -- GCECache: instances over zones.
"""

from gcpcache.cache.base import BaseCache
from gcpcache.cache.gce import GCECache
from gcpcache.cache.gke import GKECache
from gcpcache.cache.registry import CacheRegistry, get_registry
from gcpcache.cache.resource_cache import ResourceCache

__all__ = [
    "BaseCache",
    "CacheRegistry",
    "GCECache",
    "GKECache",
    "ResourceCache",
    "get_registry",
]
