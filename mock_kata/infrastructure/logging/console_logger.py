from dataclasses import dataclass
from enum import IntEnum
from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    thing_id: str = ""
    file_name: str = ""
    operation: str = ""


def _empty_stats() -> dict[str, int]:
    return {
        "lookups": 0,
        "hits": 0,
        "misses": 0,
        "files_sent": 0,
        "files_skipped": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_lookup(self, thing_id: str, *, hit: bool, found: bool = True) -> None:
        self.set_context(thing_id=thing_id, file_name="", operation="lookup")
        self._stats["lookups"] += 1
        label = escape(repr(thing_id))
        if hit:
            self._stats["hits"] += 1
            self.debug(f"Cache hit for {label}")
            return
        self._stats["misses"] += 1
        if found:
            self.verbose(f"Cache miss for {label}, stored value from service")
        else:
            self.verbose(f"Cache miss for {label}, service has no value")

    @override
    def log_file_sent(self, file_name: str) -> None:
        self.set_context(thing_id="", file_name=file_name, operation="send")
        self.debug(f"Sent {escape(file_name)}")

    @override
    def log_file_skipped(self, file_name: str, reason: str) -> None:
        self.set_context(thing_id="", file_name=file_name, operation="send")
        self._stats["files_skipped"] += 1
        self.warning(f"Skipped {escape(file_name)}: {escape(reason)}")

    @override
    def log_send_summary(self, total: int, skipped: int) -> None:
        sent = total - skipped
        self._stats["files_sent"] += sent
        if skipped:
            self.warning(f"Sent {sent} of {total} files ({skipped} skipped)")
        else:
            self.success(f"Sent {sent} of {total} files")

    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Statistics:[/dim]")
            self.console.print(
                f"[dim]  Lookups: {self._stats['lookups']} "
                f"(hits {self._stats['hits']}, misses {self._stats['misses']})[/dim]"
            )
            if self._stats["files_sent"] or self._stats["files_skipped"]:
                self.console.print(
                    f"[dim]  Files sent: {self._stats['files_sent']}, "
                    f"skipped: {self._stats['files_skipped']}[/dim]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.operation:
            parts.append(self._context.operation)
        if self._context.thing_id:
            parts.append(self._context.thing_id)
        elif self._context.file_name:
            parts.append(self._context.file_name)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
