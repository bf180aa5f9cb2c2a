import xxhash


def xxh64(data: bytes) -> int:
    """XXH64 with seed 0, the same digest as cespare/xxhash."""
    return xxhash.xxh64_intdigest(data)
