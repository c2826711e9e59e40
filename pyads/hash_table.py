from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Iterator

from .debug import dump_slots, resize_header
from .hashing import hash_string, probe
from .slot import TOMBSTONE, Empty, Live, Slot, Tombstone, new_slots


HASH_TABLE_INITIAL_SIZE = 8
# CPython's USABLE_FRACTION
HASH_TABLE_MAX_LOAD = Fraction(2, 3)


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass
class HashTable:
    """Open addressing table with linear probing and tombstone deletion.

    `length` counts live slots, `used` counts live slots plus tombstones.
    Both stay within HASH_TABLE_MAX_LOAD of `capacity`, so every probe walk
    reaches an empty slot.
    """

    slots: list[Slot]
    capacity: int
    length: int
    used: int

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("negative capacity", capacity)

        self.free()
        if capacity > 0:
            self._init(capacity)

    def get(self, key: str) -> tuple[Any, bool]:
        self._init_lazy()

        slot = self.slots[self._find_slot(key)]
        if isinstance(slot, Live):
            return slot.value, True
        return None, False

    def contains(self, key: str) -> bool:
        _, found = self.get(key)
        return found

    def set(self, key: str, value: Any):
        self._init_lazy()

        if self.used + 1 > self.capacity * HASH_TABLE_MAX_LOAD:
            self._resize()

        self._insert(key, value)

    def remove(self, key: str):
        self._init_lazy()

        index = self._find_slot(key)
        if isinstance(self.slots[index], Live):
            self.slots[index] = TOMBSTONE
            self.length -= 1

    def size(self) -> int:
        return self.length

    def clear(self):
        self.free()

    def items(self) -> Iterator[tuple[str, Any]]:
        for slot in self.slots:
            if isinstance(slot, Live):
                yield slot.key, slot.value

    def add_all(self, from_t: "HashTable"):
        for key, value in from_t.items():
            self.set(key, value)

    def free(self):
        self.slots = []
        self.capacity = 0
        self.length = 0
        self.used = 0

    def _init(self, capacity: int):
        self.slots = new_slots(capacity)
        self.capacity = capacity
        self.length = 0
        self.used = 0

    def _init_lazy(self):
        if self.capacity == 0:
            self._init(HASH_TABLE_INITIAL_SIZE)

    def _insert(self, key: str, value: Any):
        index = self._find_slot(key)

        match self.slots[index]:
            case Live() as live:
                live.value = value
            case Tombstone():
                self.slots[index] = Live(key, value)
                self.length += 1
            case Empty():
                self.slots[index] = Live(key, value)
                self.length += 1
                self.used += 1

    def _resize(self):
        old_capacity = self.capacity
        capacity = max(self.length * 2 + self.capacity // 2, self.capacity)
        while self.length + 1 > capacity * HASH_TABLE_MAX_LOAD:
            capacity += 1

        old_slots = self.slots
        self._init(capacity)
        for slot in old_slots:
            if isinstance(slot, Live):
                self._insert(slot.key, slot.value)

        if _debug_trace_resize:
            resize_header(old_capacity, self.capacity, self.length)
            dump_slots(self.slots, "resized table")

    def _find_slot(self, key: str) -> int:
        """Index of the live slot holding key, or of the slot a new pair for
        key goes into: the earliest tombstone on the walk, else the empty slot
        that ended it.
        """
        tombstone = -1
        base = hash_string(key, self.capacity)

        for attempt in range(self.capacity):
            index = probe(base, attempt, self.capacity)
            slot = self.slots[index]
            match slot:
                case Empty():
                    return index if tombstone == -1 else tombstone
                case Tombstone():
                    if tombstone == -1:
                        tombstone = index
                case Live() if slot.key == key:
                    return index

        raise AssertionError("probe walk found no empty slot", key, self.capacity)
