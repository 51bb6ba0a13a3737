from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...errors import CatalogError
from ...infrastructure.services.catalog import load_thing_catalog
from ..helpers import load_config

console = Console()


@click.command()
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
def catalog_command(catalog_path: Path | None, config_file: Path | None) -> None:
    """List the things a catalog makes available to the cache."""
    config = load_config(config_file)
    path = catalog_path or config.catalog_path
    try:
        catalog = load_thing_catalog(path)
    except CatalogError as exc:
        raise click.ClickException(str(exc)) from exc
    table = Table(title=f"Things in {escape(str(path))}")
    table.add_column("Thing ID", style="cyan")
    table.add_column("Name")
    for thing in catalog.to_things():
        table.add_row(escape(thing.thing_id), escape(thing.name))
    console.print(table)
