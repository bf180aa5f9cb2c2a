MASK_64 = 0xFFFFFFFFFFFFFFFF
MAX_UINT64 = MASK_64

# xorshift* finalizing multiplier
XORSHIFT_MULTIPLIER = 0x2545F4914F6CDD1D


def combine_hashes(a: int, b: int) -> int:
    """
    Mix two 64-bit hashes into one well-distributed 64-bit value.

    XORs the inputs, applies the xorshift* shift rounds (12, 25, 27) and
    multiplies by the xorshift* constant. Pure integer arithmetic, so the
    same pair always combines to the same value on every platform.
    """
    x = (a ^ b) & MASK_64
    x ^= x >> 12
    x ^= (x << 25) & MASK_64
    x ^= x >> 27
    return (x * XORSHIFT_MULTIPLIER) & MASK_64
