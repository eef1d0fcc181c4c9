"""Cached resource data structures and enumerations."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import StrEnum


class ResourceKind(StrEnum):
    """Category of cached entity.  Each kind owns independent cache state."""

    GKE_CLUSTER = "gke_cluster"
    GCE_INSTANCE = "gce_instance"


class CacheSharing(StrEnum):
    """How cache state is shared between cache instances of one kind."""

    KIND = "kind"  # one state per resource kind for the whole process
    SCOPE = "scope"  # one state per (kind, project, sorted locations)


@dataclass(frozen=True)
class ResourceRecord:
    """A discovered instance or cluster and the location it was found in."""

    name: str
    location: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "location": self.location}


@dataclass
class CacheState:
    """Memoized collection plus its fill flag.

    Shared by every cache instance the registry maps to the same key.
    ``lock`` serialises the check-then-fill sequence.
    """

    records: list[ResourceRecord] = field(default_factory=list)
    filled: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
