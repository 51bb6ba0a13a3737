from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.entities.document import Certificate, File
    from ..domain.entities.thing import Thing


def _empty_file_list() -> list[File]:
    return []


@dataclass(slots=True)
class SendFilesRequest:
    files: list[File]
    certificate: Certificate


@dataclass(slots=True)
class SendFilesResult:
    total: int = 0
    skipped_files: list[File] = field(default_factory=_empty_file_list)

    @property
    def sent_count(self) -> int:
        return self.total - len(self.skipped_files)

    @property
    def all_sent(self) -> bool:
        return len(self.skipped_files) == 0


@dataclass(frozen=True, slots=True)
class LookupResult:
    thing_id: str
    thing: Thing | None
    hit: bool
    backing_calls: int

    @property
    def found(self) -> bool:
        return self.thing is not None
