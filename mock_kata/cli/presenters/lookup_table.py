from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import LookupResult


class LookupTablePresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, results: Sequence[LookupResult]) -> None:
        table = Table(title="Thing Lookups")
        table.add_column("Thing ID", style="cyan")
        table.add_column("Name")
        table.add_column("Cache", justify="center")
        table.add_column("Service Calls", justify="right")
        for result in results:
            name = (
                escape(result.thing.name or result.thing.thing_id)
                if result.thing is not None
                else "[red]not found[/red]"
            )
            cache = "[green]hit[/green]" if result.hit else "[yellow]miss[/yellow]"
            table.add_row(
                escape(result.thing_id), name, cache, str(result.backing_calls)
            )
        self.console.print(table)
        found = sum(1 for result in results if result.found)
        hits = sum(1 for result in results if result.hit)
        self.console.print(
            f"[bold]{len(results)} lookups:[/bold] {found} found, {hits} cache hits"
        )
