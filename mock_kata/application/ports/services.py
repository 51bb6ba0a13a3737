from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.document import Certificate, Document, File
    from ...domain.entities.thing import Thing


@runtime_checkable
class ThingServicePort(Protocol):
    pass

    def try_read(self, thing_id: str) -> tuple[bool, Thing | None]: ...


@runtime_checkable
class RecognizerPort(Protocol):
    pass

    def try_recognize(self, file: File) -> tuple[bool, Document | None]: ...


@runtime_checkable
class CryptographerPort(Protocol):
    pass

    def sign(self, content: bytes, certificate: Certificate) -> bytes: ...


@runtime_checkable
class SenderPort(Protocol):
    pass

    def try_send(self, content: bytes) -> bool: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_lookup(self, thing_id: str, *, hit: bool, found: bool = True) -> None: ...

    def log_file_sent(self, file_name: str) -> None: ...

    def log_file_skipped(self, file_name: str, reason: str) -> None: ...

    def log_send_summary(self, total: int, skipped: int) -> None: ...
