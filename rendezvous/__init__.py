from .errors import (
    RendezvousError as RendezvousError,
    UnknownHasherError as UnknownHasherError,
)
from .hashing import (
    Hasher as Hasher,
    fnv1a_64 as fnv1a_64,
    get_hasher as get_hasher,
    sha256_64 as sha256_64,
    xxh64 as xxh64,
)
from .ring import (
    DEFAULT_WEIGHT as DEFAULT_WEIGHT,
    Ring as Ring,
)
