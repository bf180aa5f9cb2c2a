"""Hash primitives for rendezvous scoring."""

from .combine import (
    MASK_64 as MASK_64,
    MAX_UINT64 as MAX_UINT64,
    XORSHIFT_MULTIPLIER as XORSHIFT_MULTIPLIER,
    combine_hashes as combine_hashes,
)
from .fnv1a import fnv1a_64 as fnv1a_64
from .hasher import (
    Hasher as Hasher,
    HasherName as HasherName,
    get_hasher as get_hasher,
)
from .sha256 import sha256_64 as sha256_64
from .xxh64 import xxh64 as xxh64
