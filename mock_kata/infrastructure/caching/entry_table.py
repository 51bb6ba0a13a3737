from typing import Generic, TypeVar

T = TypeVar("T")


class EntryTable(Generic[T]):
    """Append-only in-memory map.

    Entries are never replaced or removed; the table lives as long as its
    owner does.
    """

    def __init__(self) -> None:
        super().__init__()
        self._store: dict[str, T] = {}

    def lookup(self, key: str) -> tuple[bool, T | None]:
        if key in self._store:
            return (True, self._store[key])
        return (False, None)

    def put_if_absent(self, key: str, value: T) -> T:
        return self._store.setdefault(key, value)

    def has(self, key: str) -> bool:
        return key in self._store

    def size(self) -> int:
        return len(self._store)

    def keys(self) -> list[str]:
        return list(self._store.keys())
