"""
Weighted rendezvous (highest random weight) scoring.

For a key and a node, the two 64-bit hashes are mixed, the result is
normalized into (0, 1) and transformed with

    score = -weight / ln(u)

For a fixed key, the probability that a node holds the maximum score is
proportional to its weight. A node's score depends only on the key hash,
its own hash and its own weight, so adding or removing other nodes never
changes the relative order of the remaining ones.
"""

import math

from rendezvous.hashing import MAX_UINT64, combine_hashes


MAX_UINT64_FLOAT = float(MAX_UINT64)

# Bounds keep ln(u) finite and strictly negative. A combined value of 0
# maps to the smallest positive normalized value, values that round up to
# 1.0 map to the largest float below 1.0.
MIN_NORMALIZED = 1.0 / MAX_UINT64_FLOAT
MAX_NORMALIZED = math.nextafter(1.0, 0.0)


def normalize_hash(combined: int) -> float:
    u = float(combined) / MAX_UINT64_FLOAT

    if u < MIN_NORMALIZED:
        return MIN_NORMALIZED

    if u > MAX_NORMALIZED:
        return MAX_NORMALIZED

    return u


def compute_score(key_hash: int, node_hash: int, weight: float) -> float:
    u = normalize_hash(combine_hashes(key_hash, node_hash))
    return -weight / math.log(u)
