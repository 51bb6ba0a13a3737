"""Lookup command - Resolve thing ids through the memoizing cache.

This module is a thin adapter between Click and the thing cache. It loads
the catalog into an in-memory service, runs every lookup through the cache
and hands the results to the table presenter.
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import LookupResult
from ...constants import Constraints, Defaults
from ...errors import CatalogError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.logging.console_logger import ConsoleLogger
from ...infrastructure.services.in_memory_thing_service import InMemoryThingService
from ..helpers import load_config
from ..presenters.lookup_table import LookupTablePresenter

console = Console()


@click.command()
@click.argument("thing_ids", nargs=-1, required=True)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path),
    help="Path to a TOML thing catalog (default: ./things.toml)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a mock_kata.toml config file (default: ./mock_kata.toml)",
)
@click.option(
    "--repeat",
    type=click.IntRange(1, Constraints.MAX_LOOKUP_REPEAT),
    default=Defaults.LOOKUP_REPEAT,
    show_default=True,
    help="How many times to look every id up",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def lookup_command(
    thing_ids: tuple[str, ...],
    catalog_path: Path | None,
    config_file: Path | None,
    repeat: int,
    verbose: int,
) -> None:
    """Look thing ids up through the cache and report hits and misses.

    Only successful lookups are cached, so ids missing from the catalog
    reach the backing service on every pass.

    Examples:

    \b
        # Look two ids up twice against ./things.toml
        mock-kata lookup TheDress CoolBoots --repeat 2

    \b
        # Use another catalog and show cache activity
        mock-kata lookup TheDress --catalog shop.toml -vv
    """
    config = load_config(config_file)
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    try:
        service = container.create_thing_service(catalog_path)
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc
    cache = container.create_thing_cache()

    results: list[LookupResult] = []
    for _ in range(repeat):
        for thing_id in thing_ids:
            hit = thing_id in cache
            thing = cache.get(thing_id)
            calls = (
                service.calls_for(thing_id)
                if isinstance(service, InMemoryThingService)
                else 0
            )
            results.append(
                LookupResult(
                    thing_id=thing_id, thing=thing, hit=hit, backing_calls=calls
                )
            )

    LookupTablePresenter(console).present(results)
    logger = container.create_logger()
    if isinstance(logger, ConsoleLogger):
        logger.log_final_stats()
