from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import InvalidArgumentError
from ..logging.null_logger import NullLogger
from .entry_table import EntryTable

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort, ThingServicePort
    from ...domain.entities.thing import Thing


class ThingCache:
    """Memoizes successful lookups against a thing service.

    A hit never consults the service. A failed lookup is not cached, so
    asking for the same id again goes back to the service.
    """

    def __init__(
        self, thing_service: ThingServicePort, *, logger: LoggerPort | None = None
    ) -> None:
        super().__init__()
        self._thing_service = thing_service
        self._entries: EntryTable[Thing] = EntryTable()
        self.logger = logger or NullLogger()

    def get(self, thing_id: str | None) -> Thing | None:
        if thing_id is None:
            raise InvalidArgumentError("thing_id")
        hit, thing = self._entries.lookup(thing_id)
        if hit:
            self.logger.log_lookup(thing_id, hit=True)
            return thing
        found, thing = self._thing_service.try_read(thing_id)
        if not found or thing is None:
            self.logger.log_lookup(thing_id, hit=False, found=False)
            return None
        self.logger.log_lookup(thing_id, hit=False)
        return self._entries.put_if_absent(thing_id, thing)

    def cached_ids(self) -> list[str]:
        return self._entries.keys()

    def __contains__(self, thing_id: object) -> bool:
        return isinstance(thing_id, str) and self._entries.has(thing_id)

    def __len__(self) -> int:
        return self._entries.size()
