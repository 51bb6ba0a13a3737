from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Thing:
    thing_id: str
    name: str = ""
