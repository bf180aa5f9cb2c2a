"""
Test: Rendezvous scoring

This test validates the scoring function:
1. Scores match the weighted HRW formula for known inputs
2. Degenerate combined hashes are clamped, never NaN or infinite
3. Weight scales the score linearly, zero weight scores zero

Run with: pytest tests/unit/ring/test_scoring.py
"""

import math

import pytest

from rendezvous.hashing import MAX_UINT64, combine_hashes
from rendezvous.ring import (
    MAX_NORMALIZED,
    MIN_NORMALIZED,
    compute_score,
    normalize_hash,
)


def test_compute_score_reference_value():
    assert compute_score(1, 2, 1.0) == pytest.approx(5.835139664772762, rel=1e-12)


def test_normalize_hash_range():
    assert normalize_hash(MAX_UINT64 // 2) == pytest.approx(0.5)
    assert 0.0 < normalize_hash(1) < 1.0


def test_normalize_hash_clamps_zero():
    assert normalize_hash(0) == MIN_NORMALIZED
    assert MIN_NORMALIZED > 0.0


def test_normalize_hash_clamps_values_rounding_to_one():
    assert normalize_hash(MAX_UINT64) == MAX_NORMALIZED
    assert normalize_hash(MAX_UINT64 - 1) == MAX_NORMALIZED
    assert MAX_NORMALIZED < 1.0


@pytest.mark.parametrize("combined", [0, 1, MAX_UINT64 - 1, MAX_UINT64])
def test_degenerate_scores_are_finite(combined: int):
    u = normalize_hash(combined)
    score = -1.0 / math.log(u)

    assert math.isfinite(score)
    assert score > 0


def test_score_for_identical_hashes_is_finite():
    """Equal key and node hashes combine to 0, the logarithm singularity."""
    assert combine_hashes(42, 42) == 0

    score = compute_score(42, 42, 1.0)

    assert math.isfinite(score)
    assert score > 0


def test_weight_scales_score():
    base = compute_score(1, 2, 1.0)

    assert compute_score(1, 2, 2.0) == pytest.approx(2 * base)
    assert compute_score(1, 2, 0.5) == pytest.approx(0.5 * base)


def test_zero_and_negative_weight():
    assert compute_score(1, 2, 0.0) == 0.0
    assert compute_score(1, 2, -1.0) < 0.0
