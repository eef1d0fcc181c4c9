"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from gcpcache.models.config import CacheConfig, DiscoveryConfig, GcpCacheConfig, LogConfig
from gcpcache.models.resources import CacheSharing


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"GCPCACHE_{key}", default)


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_sharing(value: str) -> CacheSharing:
    try:
        return CacheSharing(value.lower())
    except ValueError:
        valid = {s.value for s in CacheSharing}
        raise ValueError(f"Invalid cache sharing mode: {value}. Must be one of {valid}") from None


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def load_config(log_level: str | None = None, log_format: str | None = None) -> GcpCacheConfig:
    """Load configuration from GCPCACHE_* environment variables.

    *log_level* and *log_format*, when given, replace the environment values
    before validation, so a bad variable they override is never read.
    """
    return GcpCacheConfig(
        discovery=DiscoveryConfig(
            credentials_file=_env("CREDENTIALS_FILE", ""),
        ),
        cache=CacheConfig(
            sharing=_validate_sharing(_env("CACHE_SHARING", "scope")),
        ),
        log=LogConfig(
            level=_validate_log_level(log_level or _env("LOG_LEVEL", "info")),
            format=_validate_log_format(log_format or _env("LOG_FORMAT", "json")),
        ),
    )
