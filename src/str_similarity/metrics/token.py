"""Token-based metrics: each string is treated as a multiset of its characters.

Both strings are projected onto their shared alphabet as two aligned count
vectors (numpy int64 arrays), so every multiset operation is a vectorized
reduction::

    |A ∩ B| = sum(minimum(a, b))      |A ∪ B| = sum(maximum(a, b))
    |A ∖ B| = sum(clip(a - b, 0))     |A|     = sum(a)

Ratio metrics return ``Measurement(maximum=1.0)`` with the conventions
both-empty -> 1.0 and exactly-one-empty -> 0.0.  ``bag`` is a count distance
and ``entropy_ncd`` a ratio distance.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import TYPE_CHECKING

import numpy as np
from scipy.stats import entropy

from str_similarity.metrics.measurement import Measurement

if TYPE_CHECKING:
    from str_similarity.config import MetricConfig

__all__ = [
    "bag",
    "cosine",
    "entropy_ncd",
    "jaccard",
    "overlap",
    "roberts",
    "sorensen_dice",
    "tversky",
]


def _count_vectors(a: str, b: str) -> tuple[np.ndarray, np.ndarray]:
    """Return aligned character-count vectors for ``a`` and ``b``.

    Row ``k`` of both arrays refers to the same character; the alphabet is
    the sorted union of both strings so the layout is deterministic.
    """
    counts_a = Counter(a)
    counts_b = Counter(b)
    alphabet = sorted(counts_a.keys() | counts_b.keys())
    vec_a = np.array([counts_a[ch] for ch in alphabet], dtype=np.int64)
    vec_b = np.array([counts_b[ch] for ch in alphabet], dtype=np.int64)
    return vec_a, vec_b


def _ratio(numerator: float, denominator: float, *, empty: bool) -> Measurement:
    """Build a similarity ratio, applying the empty-input conventions."""
    if empty:
        return Measurement(value=1.0, is_distance=False)
    if denominator == 0:
        return Measurement(value=0.0, is_distance=False)
    return Measurement(value=numerator / denominator, is_distance=False)


# ---------------------------------------------------------------------------
# Count distance
# ---------------------------------------------------------------------------


def bag(left: str, right: str, config: MetricConfig) -> Measurement:
    """Bag distance: the larger of the two one-sided multiset differences."""
    a, b = _count_vectors(left, right)
    only_left = int(np.clip(a - b, 0, None).sum())
    only_right = int(np.clip(b - a, 0, None).sum())
    return Measurement(
        value=max(only_left, only_right),
        is_distance=True,
        maximum=max(len(left), len(right)),
    )


# ---------------------------------------------------------------------------
# Set-overlap ratios
# ---------------------------------------------------------------------------


def jaccard(left: str, right: str, config: MetricConfig) -> Measurement:
    a, b = _count_vectors(left, right)
    intersection = int(np.minimum(a, b).sum())
    union = int(np.maximum(a, b).sum())
    return _ratio(intersection, union, empty=not left and not right)


def sorensen_dice(left: str, right: str, config: MetricConfig) -> Measurement:
    a, b = _count_vectors(left, right)
    intersection = int(np.minimum(a, b).sum())
    return _ratio(
        2 * intersection, len(left) + len(right), empty=not left and not right
    )


def cosine(left: str, right: str, config: MetricConfig) -> Measurement:
    """Multiset cosine (Ochiai): ``|A ∩ B| / sqrt(|A| * |B|)``."""
    a, b = _count_vectors(left, right)
    intersection = int(np.minimum(a, b).sum())
    return _ratio(
        intersection,
        math.sqrt(len(left) * len(right)),
        empty=not left and not right,
    )


def overlap(left: str, right: str, config: MetricConfig) -> Measurement:
    """Szymkiewicz-Simpson overlap: ``|A ∩ B| / min(|A|, |B|)``."""
    a, b = _count_vectors(left, right)
    intersection = int(np.minimum(a, b).sum())
    return _ratio(
        intersection,
        min(len(left), len(right)),
        empty=not left and not right,
    )


def tversky(left: str, right: str, config: MetricConfig) -> Measurement:
    """Tversky index ``|A∩B| / (|A∩B| + α|A∖B| + β|B∖A|)``.

    With the default ``α = β = 1`` this equals Jaccard.  Unequal weights make
    the index asymmetric: ``α`` weighs what only ``left`` contains.
    """
    a, b = _count_vectors(left, right)
    intersection = int(np.minimum(a, b).sum())
    only_left = int(np.clip(a - b, 0, None).sum())
    only_right = int(np.clip(b - a, 0, None).sum())
    denominator = (
        intersection
        + config.tversky_alpha * only_left
        + config.tversky_beta * only_right
    )
    return _ratio(intersection, denominator, empty=not left and not right)


def roberts(left: str, right: str, config: MetricConfig) -> Measurement:
    """Roberts similarity: per-character agreement weighted by joint frequency.

    ``Σ (a_k + b_k) * min(a_k, b_k) / max(a_k, b_k)  /  Σ (a_k + b_k)``
    """
    a, b = _count_vectors(left, right)
    joint = a + b
    if joint.size == 0:
        return Measurement(value=1.0, is_distance=False)
    # max(a_k, b_k) >= 1 on the shared alphabet
    agreement = np.minimum(a, b) / np.maximum(a, b)
    numerator = float((joint * agreement).sum())
    return _ratio(numerator, float(joint.sum()), empty=False)


# ---------------------------------------------------------------------------
# Compression distance
# ---------------------------------------------------------------------------


def _compressed_size(counts: np.ndarray, config: MetricConfig) -> float:
    """Entropy "compressor": ``coef + H(counts)`` in ``entropy_base`` units."""
    total = counts.sum()
    if total == 0:
        return config.entropy_coef
    observed = counts[counts > 0]
    return config.entropy_coef + float(entropy(observed, base=config.entropy_base))


def entropy_ncd(left: str, right: str, config: MetricConfig) -> Measurement:
    """Normalized compression distance with a Shannon-entropy compressor.

    ``NCD = (C(ab) - min(C(a), C(b))) / max(C(a), C(b))``

    The concatenation ``ab`` has the character distribution ``a + b``, so its
    size is computed from the summed count vector.  ``entropy_coef > 0``
    keeps the denominator positive even for single-symbol strings.
    """
    a, b = _count_vectors(left, right)
    size_a = _compressed_size(a, config)
    size_b = _compressed_size(b, config)
    size_ab = _compressed_size(a + b, config)
    larger = max(size_a, size_b)
    if larger == 0:
        return Measurement(value=0.0, is_distance=True)
    return Measurement(value=(size_ab - min(size_a, size_b)) / larger, is_distance=True)
