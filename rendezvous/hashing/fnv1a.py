from .combine import MASK_64

FNV_OFFSET_BASIS_64 = 0xCBF29CE484222325
FNV_PRIME_64 = 0x100000001B3


def fnv1a_64(data: bytes) -> int:
    """64-bit FNV-1a, bit-for-bit compatible with Go's hash/fnv New64a."""
    value = FNV_OFFSET_BASIS_64
    for byte in data:
        value ^= byte
        value = (value * FNV_PRIME_64) & MASK_64

    return value
