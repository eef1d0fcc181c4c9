"""Shared fixtures for gcpcache CLI integration tests.

The CLI is exercised end to end through click's CliRunner, with the Google
discovery client replaced by FakeDiscoveryClient and the process-wide cache
registry emptied around every test.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import structlog.testing
from click.testing import CliRunner
from fakes import FakeDiscoveryClient

from gcpcache.cache.registry import get_registry


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fake_client() -> Iterator[FakeDiscoveryClient]:
    client = FakeDiscoveryClient(
        zones={"acme-prod": ["us-east1-b", "us-east1-c"]},
        regions={"acme-prod": ["us-east1"]},
        clusters={
            ("acme-prod", "us-east1-b"): ["batch"],
            ("acme-prod", "us-east1"): ["web", "api"],
        },
        instances={
            ("acme-prod", "us-east1-b"): ["bastion"],
            ("acme-prod", "us-east1-c"): ["db-0", "db-1"],
        },
    )
    with patch("gcpcache.cli.main.get_default_client", return_value=client):
        yield client


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[MagicMock]:
    """Skip the JSON-to-stderr setup so log lines never mix into command output."""
    with patch("gcpcache.cli.main.setup_logging") as mock:
        yield mock


@pytest.fixture(autouse=True)
def log_events() -> Iterator[list[dict[str, Any]]]:
    with structlog.testing.capture_logs() as events:
        yield events


@pytest.fixture(autouse=True)
def _empty_registry() -> Iterator[None]:
    get_registry().clear()
    yield
    get_registry().clear()
