"""Shared fixtures for gcpcache unit tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fakes import FakeDiscoveryClient

from gcpcache.cache.registry import CacheRegistry, get_registry
from gcpcache.models.resources import CacheSharing


def make_client() -> FakeDiscoveryClient:
    """Two projects: proj-a with zonal and regional clusters, proj-b with one of each."""
    return FakeDiscoveryClient(
        zones={"proj-a": ["us-central1-a", "us-central1-b"], "proj-b": ["europe-west1-b"]},
        regions={"proj-a": ["us-central1"], "proj-b": ["europe-west1"]},
        clusters={
            ("proj-a", "us-central1-a"): ["zonal-1"],
            ("proj-a", "us-central1"): ["regional-1", "regional-2"],
            ("proj-b", "europe-west1"): ["eu-cluster"],
        },
        instances={
            ("proj-a", "us-central1-a"): ["vm-a1", "vm-a2"],
            ("proj-a", "us-central1-b"): ["vm-b1"],
            ("proj-b", "europe-west1-b"): ["eu-vm"],
        },
    )


@pytest.fixture
def client() -> FakeDiscoveryClient:
    return make_client()


@pytest.fixture
def scope_registry() -> CacheRegistry:
    return CacheRegistry(sharing=CacheSharing.SCOPE)


@pytest.fixture
def kind_registry() -> CacheRegistry:
    return CacheRegistry(sharing=CacheSharing.KIND)


@pytest.fixture
def process_registry() -> Iterator[CacheRegistry]:
    """The process-wide registry, emptied around the test since it outlives it."""
    registry = get_registry()
    registry.clear()
    yield registry
    registry.clear()
