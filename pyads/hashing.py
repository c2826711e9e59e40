HASH_TABLE_MULTIPLIER = 53


def hash_string(key: str, capacity: int) -> int:
    """Polynomial rolling hash of key, reduced modulo capacity at every step.

    The result depends on capacity, so it must be recomputed after a resize.
    """
    hash = 0
    for c in key:
        hash = (hash * HASH_TABLE_MULTIPLIER + ord(c)) % capacity
    return hash


def probe(base: int, attempt: int, capacity: int) -> int:
    return (base + attempt) % capacity
