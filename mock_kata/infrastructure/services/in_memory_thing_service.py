from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from typing_extensions import override

from ...application.ports.services import ThingServicePort

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...domain.entities.thing import Thing
    from .catalog import ThingCatalog


class InMemoryThingService(ThingServicePort):
    """Dict-backed thing service that records every ``try_read`` call."""

    def __init__(self, things: Iterable[Thing] = ()) -> None:
        super().__init__()
        self._things: dict[str, Thing] = {thing.thing_id: thing for thing in things}
        self._calls: Counter[str] = Counter()

    @classmethod
    def from_catalog(cls, catalog: ThingCatalog) -> InMemoryThingService:
        return cls(catalog.to_things())

    def add(self, thing: Thing) -> None:
        self._things[thing.thing_id] = thing

    @override
    def try_read(self, thing_id: str) -> tuple[bool, Thing | None]:
        self._calls[thing_id] += 1
        thing = self._things.get(thing_id)
        return (thing is not None, thing)

    @property
    def call_count(self) -> int:
        return sum(self._calls.values())

    def calls_for(self, thing_id: str) -> int:
        return self._calls[thing_id]

    def ids(self) -> list[str]:
        return sorted(self._things)
