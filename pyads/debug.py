from .hashing import hash_string
from .shared import printf
from .slot import Empty, Live, Slot, Tombstone, print_value


def dump_slots(slots: list[Slot], name: str):
    printf("== {0:s} ==\n", name)

    index = 0
    while index < len(slots):
        index = dump_slot(slots, index)


def dump_slot(slots: list[Slot], index: int) -> int:
    printf("{0:04d} ", index)

    slot = slots[index]
    match slot:
        case Empty():
            printf("EMPTY\n")
        case Tombstone():
            printf("TOMBSTONE\n")
        case Live():
            live_slot(slot, len(slots), index)
        case _:
            printf("Unknown slot {0!r}\n", slot)
    return index + 1


def live_slot(slot: Live, capacity: int, index: int):
    home = hash_string(slot.key, capacity)
    printf("{0:<16s} {1:4d} '{2:s}' = '", "LIVE", home, slot.key)
    print_value(slot.value)
    printf("'")
    if home != index:
        # displaced by a collision
        printf(" +{0:d}", (index - home) % capacity)
    printf("\n")


def resize_header(old_capacity: int, new_capacity: int, length: int):
    printf(
        "resize {0:d} -> {1:d} ({2:d} live)\n", old_capacity, new_capacity, length
    )
