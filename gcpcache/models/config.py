"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from gcpcache.models.resources import CacheSharing


@dataclass
class DiscoveryConfig:
    """Google Cloud discovery client configuration."""

    credentials_file: str = ""  # empty means Application Default Credentials


@dataclass
class CacheConfig:
    """Cache registry configuration."""

    sharing: CacheSharing = CacheSharing.SCOPE


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"  # "json" or "console"


@dataclass
class GcpCacheConfig:
    """Top-level gcpcache configuration."""

    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    log: LogConfig = field(default_factory=LogConfig)
