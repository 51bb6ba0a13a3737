from typing_extensions import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_lookup(self, thing_id: str, *, hit: bool, found: bool = True) -> None:
        return None

    @override
    def log_file_sent(self, file_name: str) -> None:
        return None

    @override
    def log_file_skipped(self, file_name: str, reason: str) -> None:
        return None

    @override
    def log_send_summary(self, total: int, skipped: int) -> None:
        return None
