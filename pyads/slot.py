from dataclasses import dataclass
from typing import Any

from .shared import printf


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass
class Live:
    key: str
    value: Any


Slot = Empty | Tombstone | Live


EMPTY = Empty()
TOMBSTONE = Tombstone()


def new_slots(capacity: int) -> list[Slot]:
    return [EMPTY for _ in range(capacity)]


def print_value(value: Any):
    if value is None:
        printf("nil")
    elif isinstance(value, bool):
        printf("true" if value else "false")
    elif isinstance(value, str):
        printf("{0:s}", value)
    else:
        printf("{0!r}", value)
