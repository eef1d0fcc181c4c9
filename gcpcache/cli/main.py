"""Click entry point: dump discovered locations and cached inventories as JSON."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import click
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

from gcpcache import __version__
from gcpcache.cache import GCECache, GKECache
from gcpcache.config import load_config
from gcpcache.discovery.client import get_default_client
from gcpcache.discovery.locations import LocationResolver
from gcpcache.observability.logging import get_logger, setup_logging


def _emit(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _run(action: Callable[[], Any]) -> Any:
    """Run a discovery action, turning Google API failures into CLI errors."""
    try:
        return action()
    except (GoogleAPIError, GoogleAuthError) as exc:
        get_logger("cli").error("cli_discovery_failed", error=str(exc))
        raise click.ClickException(f"discovery failed: {exc}") from exc


@click.group()
@click.version_option(__version__, prog_name="gcpcache")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Overrides GCPCACHE_LOG_LEVEL.",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"], case_sensitive=False),
    default=None,
    help="Overrides GCPCACHE_LOG_FORMAT.",
)
def cli(log_level: str | None, log_format: str | None) -> None:
    """Inspect the GCE/GKE inventory cache for a project."""
    try:
        config = load_config(log_level=log_level, log_format=log_format)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(config.log.level, config.log.format)


@cli.command()
@click.argument("project")
@click.option("--zones-only", is_flag=True, help="Skip regions.")
def locations(project: str, zones_only: bool) -> None:
    """List every zone (and region) of PROJECT."""
    resolver = LocationResolver(get_default_client())
    if zones_only:
        _emit(_run(lambda: resolver.zones(project)))
    else:
        _emit(_run(lambda: resolver.resolve(project)))


@cli.command("gke-clusters")
@click.argument("project")
@click.option("-l", "--location", "locations_", multiple=True, help="Zone or region; repeatable. Default: all.")
def gke_clusters(project: str, locations_: tuple[str, ...]) -> None:
    """List GKE clusters of PROJECT with their locations."""
    cache = _run(lambda: GKECache(project, list(locations_), client=get_default_client()))
    _emit([record.to_dict() for record in _run(cache.cache)])


@cli.command("gce-instances")
@click.argument("project")
@click.option("-z", "--zone", "zones", multiple=True, help="Zone; repeatable. Default: all zones.")
def gce_instances(project: str, zones: tuple[str, ...]) -> None:
    """List GCE instances of PROJECT with their zones."""
    cache = _run(lambda: GCECache(project, list(zones), client=get_default_client()))
    _emit([record.to_dict() for record in _run(cache.cache)])
