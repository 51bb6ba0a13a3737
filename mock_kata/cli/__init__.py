import click

from .commands.catalog import catalog_command
from .commands.lookup import lookup_command


@click.group()
def app() -> None:
    pass


app.add_command(lookup_command, name="lookup")
app.add_command(catalog_command, name="catalog")
__all__ = ["app"]
