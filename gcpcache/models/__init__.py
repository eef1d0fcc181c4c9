"""Core data structures for gcpcache."""

from gcpcache.models.config import CacheConfig, DiscoveryConfig, GcpCacheConfig, LogConfig
from gcpcache.models.resources import CacheSharing, CacheState, ResourceKind, ResourceRecord

__all__ = [
    "CacheConfig",
    "CacheSharing",
    "CacheState",
    "DiscoveryConfig",
    "GcpCacheConfig",
    "LogConfig",
    "ResourceKind",
    "ResourceRecord",
]
