from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class File:
    name: str
    content: bytes = b""


@dataclass(slots=True)
class Document:
    name: str
    content: bytes
    created: datetime = field(default_factory=datetime.now)
    format: str | None = None

    @classmethod
    def from_file(
        cls, file: File, *, created: datetime, format: str | None
    ) -> "Document":
        return cls(name=file.name, content=file.content, created=created, format=format)


@dataclass(frozen=True, slots=True)
class Certificate:
    subject: str
    thumbprint: str = ""
