"""Fill-once memoized enumeration of one resource kind.

The first ``cache()`` call for a key scans every location of the calling
instance and stores the records in the registry's shared CacheState.  Later
calls, from this or any other instance mapped to the same state, return the
stored list without touching the API.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog

from gcpcache.cache.base import BaseCache
from gcpcache.cache.registry import CacheRegistry, get_registry
from gcpcache.discovery.client import DiscoveryClient
from gcpcache.discovery.locations import LocationResolver
from gcpcache.models.resources import CacheState, ResourceKind, ResourceRecord
from gcpcache.observability.metrics import (
    cache_fill_duration_seconds,
    cache_fills_total,
    cache_requests_total,
)

_log = structlog.get_logger(component="cache.resource_cache")


class ResourceCache(BaseCache, ABC):
    """Base class for the GKE and GCE caches.

    Subclasses set ``kind`` and implement ``_list_names`` for one location.
    """

    kind: ResourceKind

    def __init__(
        self,
        project: str = "",
        locations: Sequence[str | None] | None = None,
        *,
        client: DiscoveryClient | None = None,
        resolver: LocationResolver | None = None,
        registry: CacheRegistry | None = None,
    ) -> None:
        super().__init__(project, locations, client=client, resolver=resolver)
        self._registry = registry if registry is not None else get_registry()
        self._state: CacheState = self._registry.state_for(self.kind, self.project, self.locations)

    @abstractmethod
    def _list_names(self, location: str) -> list[str]:
        """Names of this kind's resources in *location*."""

    def cache(self) -> list[ResourceRecord]:
        """Return the shared records, filling them first if needed.

        Callers must treat the returned list as read-only; it is the shared
        collection, not a copy.
        """
        state = self._state
        with state.lock:
            if state.filled:
                cache_requests_total.labels(kind=self.kind.value, result="hit").inc()
            else:
                cache_requests_total.labels(kind=self.kind.value, result="miss").inc()
                self._fill(state)
            return state.records

    def is_cached(self) -> bool:
        return self._state.filled

    def fill(self) -> list[ResourceRecord]:
        """Rescan this instance's locations, replacing whatever the state held."""
        with self._state.lock:
            self._fill(self._state)
            return self._state.records

    def _fill(self, state: CacheState) -> None:
        # Caller holds state.lock.  Discovery client log lines inherit kind and project.
        with structlog.contextvars.bound_contextvars(kind=self.kind.value, project=self.project):
            _log.info("cache_fill_started", locations=len(self.locations))
            started = time.monotonic()

            state.filled = False
            state.records = []
            try:
                for location in self.locations:
                    for name in self._list_names(location):
                        state.records.append(ResourceRecord(name=name, location=location))
            except Exception as exc:
                cache_fills_total.labels(kind=self.kind.value, success="false").inc()
                _log.debug("cache_fill_failed", records_before_error=len(state.records), error=str(exc))
                raise

            state.filled = True
            elapsed = time.monotonic() - started
            cache_fills_total.labels(kind=self.kind.value, success="true").inc()
            cache_fill_duration_seconds.labels(kind=self.kind.value).observe(elapsed)
            _log.info("cache_fill_completed", records=len(state.records), duration_s=round(elapsed, 3))
