"""Prometheus metrics for discovery calls and cache fills."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

discovery_calls_total = Counter(
    "gcpcache_discovery_calls_total",
    "Calls issued to the cloud discovery API",
    ["call", "success"],
)

cache_requests_total = Counter(
    "gcpcache_cache_requests_total",
    "cache() requests, split by whether a fill was needed",
    ["kind", "result"],
)

cache_fills_total = Counter(
    "gcpcache_cache_fills_total",
    "Completed or aborted cache fill passes",
    ["kind", "success"],
)

cache_fill_duration_seconds = Histogram(
    "gcpcache_cache_fill_duration_seconds",
    "Wall-clock duration of a full cache fill pass",
    ["kind"],
    buckets=(0.5, 1, 5, 10, 30, 60, 120, 300),
)
