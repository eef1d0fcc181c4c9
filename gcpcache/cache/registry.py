"""Process-wide owner of every CacheState."""

from __future__ import annotations

import threading
from collections.abc import Sequence

import structlog

from gcpcache.config import load_config
from gcpcache.models.resources import CacheSharing, CacheState, ResourceKind

_log = structlog.get_logger(component="cache.registry")

_StateKey = tuple[ResourceKind, str, tuple[str, ...]]


class CacheRegistry:
    """Maps a cache key to its shared CacheState.

    With ``CacheSharing.SCOPE`` the key is ``(kind, project, sorted locations)``,
    so two caches share data only when they would scan the same thing.
    With ``CacheSharing.KIND`` the key is the kind alone: the first fill of a
    kind is served to every later instance regardless of project or locations.
    """

    def __init__(self, sharing: CacheSharing = CacheSharing.SCOPE) -> None:
        self._sharing = sharing
        self._states: dict[_StateKey, CacheState] = {}
        self._lock = threading.Lock()

    @property
    def sharing(self) -> CacheSharing:
        return self._sharing

    def key_for(self, kind: ResourceKind, project: str, locations: Sequence[str]) -> _StateKey:
        if self._sharing == CacheSharing.KIND:
            return (kind, "", ())
        return (kind, project, tuple(sorted(locations)))

    def state_for(self, kind: ResourceKind, project: str, locations: Sequence[str]) -> CacheState:
        """Return the state for this key, creating it empty on first use."""
        key = self.key_for(kind, project, locations)
        with self._lock:
            state = self._states.get(key)
            if state is None:
                state = CacheState()
                self._states[key] = state
                _log.debug("cache_state_created", kind=kind.value, project=project, sharing=self._sharing.value)
            return state

    def __len__(self) -> int:
        return len(self._states)

    def clear(self) -> None:
        """Drop every state.  Only meant for test isolation."""
        with self._lock:
            self._states.clear()


_registry: CacheRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> CacheRegistry:
    """Return the process-wide registry, configured from GCPCACHE_CACHE_SHARING.

    Threads racing on first use all receive the same instance.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = CacheRegistry(sharing=load_config().cache.sharing)
    return _registry
