"""Boundary to the Google Cloud discovery APIs.

DiscoveryClient        -- ABC for the four name-listing calls the caches need.
GoogleDiscoveryClient  -- Implementation backed by google-cloud-compute and
                          google-cloud-container.
get_default_client     -- Process-wide client built from configuration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
import threading
from typing import Any

import structlog
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import compute_v1, container_v1
from google.oauth2 import service_account

from gcpcache.config import load_config
from gcpcache.observability.metrics import discovery_calls_total

_log = structlog.get_logger(component="discovery.client")


class DiscoveryClient(ABC):
    """Lists resource names for a project.

    Implementations return names in the order the API yields them and let
    API errors propagate; callers decide whether to retry.
    """

    @abstractmethod
    def zone_names(self, project: str) -> list[str]:
        """All zone names visible to *project*."""

    @abstractmethod
    def region_names(self, project: str) -> list[str]:
        """All region names visible to *project*."""

    @abstractmethod
    def cluster_names(self, project: str, location: str) -> list[str]:
        """GKE cluster names in a zone or region."""

    @abstractmethod
    def instance_names(self, project: str, zone: str) -> list[str]:
        """GCE instance names in a zone."""


class GoogleDiscoveryClient(DiscoveryClient):
    """DiscoveryClient using the official Google Cloud client libraries.

    API clients are created on first use.  With no ``credentials_file`` the
    libraries fall back to Application Default Credentials.
    """

    def __init__(self, credentials_file: str = "") -> None:
        self._credentials_file = credentials_file
        self._credentials: service_account.Credentials | None = None
        self._zones_client: compute_v1.ZonesClient | None = None
        self._regions_client: compute_v1.RegionsClient | None = None
        self._instances_client: compute_v1.InstancesClient | None = None
        self._gke_client: container_v1.ClusterManagerClient | None = None

    def _get_credentials(self) -> service_account.Credentials | None:
        if self._credentials is None and self._credentials_file:
            try:
                self._credentials = service_account.Credentials.from_service_account_file(
                    self._credentials_file
                )
            except (OSError, ValueError) as exc:
                raise DefaultCredentialsError(
                    f"cannot load service account file {self._credentials_file}: {exc}"
                ) from exc
        return self._credentials

    def _get_zones_client(self) -> compute_v1.ZonesClient:
        if self._zones_client is None:
            self._zones_client = compute_v1.ZonesClient(credentials=self._get_credentials())
        return self._zones_client

    def _get_regions_client(self) -> compute_v1.RegionsClient:
        if self._regions_client is None:
            self._regions_client = compute_v1.RegionsClient(credentials=self._get_credentials())
        return self._regions_client

    def _get_instances_client(self) -> compute_v1.InstancesClient:
        if self._instances_client is None:
            self._instances_client = compute_v1.InstancesClient(credentials=self._get_credentials())
        return self._instances_client

    def _get_gke_client(self) -> container_v1.ClusterManagerClient:
        if self._gke_client is None:
            self._gke_client = container_v1.ClusterManagerClient(credentials=self._get_credentials())
        return self._gke_client

    def zone_names(self, project: str) -> list[str]:
        request = compute_v1.ListZonesRequest(project=project)
        return self._names("list_zones", lambda: self._get_zones_client().list(request=request), project=project)

    def region_names(self, project: str) -> list[str]:
        request = compute_v1.ListRegionsRequest(project=project)
        return self._names("list_regions", lambda: self._get_regions_client().list(request=request), project=project)

    def cluster_names(self, project: str, location: str) -> list[str]:
        parent = f"projects/{project}/locations/{location}"
        return self._names(
            "list_clusters",
            lambda: self._get_gke_client().list_clusters(parent=parent).clusters,
            project=project,
            location=location,
        )

    def instance_names(self, project: str, zone: str) -> list[str]:
        request = compute_v1.ListInstancesRequest(project=project, zone=zone)
        return self._names(
            "list_instances",
            lambda: self._get_instances_client().list(request=request),
            project=project,
            location=zone,
        )

    def _names(self, call: str, fetch: Callable[[], Iterable[Any]], **context: str) -> list[str]:
        """Run *fetch*, collect ``.name`` from every item and record the outcome."""
        try:
            # Pagers fetch further pages lazily, so iterate inside the try.
            names = [item.name for item in fetch()]
        except Exception as exc:
            discovery_calls_total.labels(call=call, success="false").inc()
            _log.debug("discovery_call_failed", call=call, error=str(exc), **context)
            raise
        discovery_calls_total.labels(call=call, success="true").inc()
        _log.debug("discovery_call_completed", call=call, count=len(names), **context)
        return names


_default_client: DiscoveryClient | None = None
_default_client_lock = threading.Lock()


def get_default_client() -> DiscoveryClient:
    """Return the process-wide GoogleDiscoveryClient, built once on first use."""
    global _default_client
    if _default_client is None:
        with _default_client_lock:
            if _default_client is None:
                config = load_config()
                _default_client = GoogleDiscoveryClient(credentials_file=config.discovery.credentials_file)
    return _default_client
