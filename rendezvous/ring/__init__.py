"""
Weighted rendezvous ring.

Provides:
- Ring: thread-safe weighted node set with rendezvous (HRW) lookups
- Node / ScoredNode: ring members and per-lookup scores
- ReadWriteLock: shared/exclusive lock guarding ring membership
- Scoring primitives used to rank nodes for a key
"""

from .constants import DEFAULT_WEIGHT
from .node import Node
from .read_write_lock import ReadWriteLock
from .ring import Ring
from .scored_node import ScoredNode
from .scoring import (
    MAX_NORMALIZED,
    MIN_NORMALIZED,
    compute_score,
    normalize_hash,
)

__all__ = [
    "DEFAULT_WEIGHT",
    "Node",
    "ScoredNode",
    "ReadWriteLock",
    "Ring",
    "compute_score",
    "normalize_hash",
    "MIN_NORMALIZED",
    "MAX_NORMALIZED",
]
