from pathlib import Path
import tomllib

from pydantic import BaseModel, Field, ValidationError, model_validator

from ...domain.entities.thing import Thing
from ...errors import CatalogNotFoundError, CatalogParseError


class CatalogEntry(BaseModel):
    id: str = Field(min_length=1)
    name: str = ""

    def to_thing(self) -> Thing:
        return Thing(thing_id=self.id, name=self.name)


class ThingCatalog(BaseModel):
    things: list[CatalogEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "ThingCatalog":
        seen: set[str] = set()
        duplicates: list[str] = []
        for entry in self.things:
            if entry.id in seen:
                duplicates.append(entry.id)
            seen.add(entry.id)
        if duplicates:
            raise ValueError(f"Duplicate thing ids: {sorted(set(duplicates))}")
        return self

    def to_things(self) -> list[Thing]:
        return [entry.to_thing() for entry in self.things]


def load_thing_catalog(path: str | Path) -> ThingCatalog:
    """Read a TOML catalog made of ``[[things]]`` tables.

    Raises:
        CatalogNotFoundError: The file does not exist.
        CatalogParseError: The file is not valid TOML or fails validation.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise CatalogNotFoundError(f"Thing catalog not found: {file_path}")
    try:
        with file_path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise CatalogParseError(f"Invalid TOML in {file_path}: {exc}") from exc
    try:
        return ThingCatalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogParseError(f"Invalid thing catalog {file_path}: {exc}") from exc
