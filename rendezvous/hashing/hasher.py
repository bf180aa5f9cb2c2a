from typing import Literal, Protocol

from rendezvous.errors import UnknownHasherError

from .fnv1a import fnv1a_64
from .sha256 import sha256_64
from .xxh64 import xxh64


HasherName = Literal["fnv1a", "xxhash", "sha256"]


class Hasher(Protocol):
    """
    Keyed 64-bit hash capability injected into a Ring.

    Implementations must be pure: the same input always yields the same
    unsigned 64-bit integer within a process, and concurrent calls share
    no mutable state.
    """

    def __call__(self, data: bytes) -> int: ...


_HASHERS: dict[str, Hasher] = {
    "fnv1a": fnv1a_64,
    "xxhash": xxh64,
    "sha256": sha256_64,
}


def get_hasher(name: HasherName) -> Hasher:
    if (hasher := _HASHERS.get(name)) is None:
        raise UnknownHasherError(name, sorted(_HASHERS))

    return hasher
