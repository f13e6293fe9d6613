"""Edit-based metrics: Levenshtein and relatives, Jaro, common subsequences.

All count metrics report ``maximum = max(len(left), len(right))`` so that the
normalized form lands in [0, 1].  Jaro, Jaro-Winkler and Yujian-Bo are
already ratios and report ``maximum = 1.0``.

Damerau-Levenshtein, Hamming, the longest common subsequence and the Jaro
kernel come from ``rapidfuzz.distance``.  Levenshtein and the longest common
substring are rolling-row tables of plain Python ints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rapidfuzz.distance import DamerauLevenshtein, Hamming, Jaro, LCSseq, Prefix

from str_similarity.metrics.measurement import Measurement

if TYPE_CHECKING:
    from str_similarity.config import MetricConfig

__all__ = [
    "damerau_levenshtein",
    "hamming",
    "hamming_distance",
    "jaro",
    "jaro_winkler",
    "length",
    "levenshtein",
    "levenshtein_distance",
    "longest_common_subsequence",
    "longest_common_substring",
    "yujian_bo",
]


# ---------------------------------------------------------------------------
# Shared kernels
# ---------------------------------------------------------------------------


def levenshtein_distance(a: str, b: str) -> int:
    """Insertions, deletions and substitutions needed to turn ``a`` into ``b``.

    ``lig3`` and ``yujian_bo`` reuse this count.  The longer string drives
    the outer loop so each row is sized by the shorter one.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    above = list(range(len(b) + 1))
    for row, ch_a in enumerate(a, start=1):
        current = [row]
        for col, ch_b in enumerate(b, start=1):
            current.append(
                min(
                    current[col - 1] + 1,
                    above[col] + 1,
                    above[col - 1] + (ch_a != ch_b),
                )
            )
        above = current
    return above[-1]


def hamming_distance(a: str, b: str) -> int:
    """Count positional mismatches; overhanging characters count as mismatches.

    ``hamming_distance("abc", "a") == 2``.
    """
    return Hamming.distance(a, b, pad=True)


def _longer(a: str, b: str) -> int:
    return max(len(a), len(b))


# ---------------------------------------------------------------------------
# Distance metrics
# ---------------------------------------------------------------------------


def levenshtein(left: str, right: str, config: MetricConfig) -> Measurement:
    return Measurement(
        value=levenshtein_distance(left, right),
        is_distance=True,
        maximum=_longer(left, right),
    )


def damerau_levenshtein(left: str, right: str, config: MetricConfig) -> Measurement:
    """Unrestricted Damerau-Levenshtein distance.

    Adjacent transpositions cost 1 and, unlike the optimal-string-alignment
    variant, a transposed pair may be edited again afterwards, so
    ``"ca" -> "abc"`` costs 2.
    """
    return Measurement(
        value=DamerauLevenshtein.distance(left, right),
        is_distance=True,
        maximum=_longer(left, right),
    )


def hamming(left: str, right: str, config: MetricConfig) -> Measurement:
    return Measurement(
        value=hamming_distance(left, right),
        is_distance=True,
        maximum=_longer(left, right),
    )


def length(left: str, right: str, config: MetricConfig) -> Measurement:
    """Absolute length difference."""
    return Measurement(
        value=abs(len(left) - len(right)),
        is_distance=True,
        maximum=_longer(left, right),
    )


def yujian_bo(left: str, right: str, config: MetricConfig) -> Measurement:
    """Yujian-Bo normalized Levenshtein distance: ``2d / (|a| + |b| + d)``.

    Unlike ``d / max(|a|, |b|)`` this normalization is itself a metric
    (it satisfies the triangle inequality).
    """
    d = levenshtein_distance(left, right)
    if d == 0:
        return Measurement(value=0.0, is_distance=True)
    return Measurement(value=2 * d / (len(left) + len(right) + d), is_distance=True)


# ---------------------------------------------------------------------------
# Similarity metrics
# ---------------------------------------------------------------------------


def longest_common_subsequence(
    left: str, right: str, config: MetricConfig
) -> Measurement:
    """Length of the longest (not necessarily contiguous) common subsequence."""
    return Measurement(
        value=LCSseq.similarity(left, right),
        is_distance=False,
        maximum=_longer(left, right),
    )


def longest_common_substring(
    left: str, right: str, config: MetricConfig
) -> Measurement:
    """Length of the longest contiguous run shared by both strings."""
    best = 0
    prev_row = [0] * (len(right) + 1)
    for ch_a in left:
        curr_row = [0] * (len(right) + 1)
        for j, ch_b in enumerate(right):
            if ch_a == ch_b:
                run = prev_row[j] + 1
                curr_row[j + 1] = run
                if run > best:
                    best = run
        prev_row = curr_row

    return Measurement(value=best, is_distance=False, maximum=_longer(left, right))


def _jaro_similarity(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return Jaro.similarity(a, b)


def jaro(left: str, right: str, config: MetricConfig) -> Measurement:
    """Jaro similarity in [0, 1]; both empty -> 1.0, exactly one empty -> 0.0."""
    return Measurement(value=_jaro_similarity(left, right), is_distance=False)


def jaro_winkler(left: str, right: str, config: MetricConfig) -> Measurement:
    """Jaro similarity boosted by the shared prefix.

    ``jw = j + p * w * (1 - j)`` where ``p`` is the common prefix length
    capped at ``config.winkler_max_prefix`` and ``w`` is
    ``config.winkler_prefix_weight``.  The config guarantees ``p * w <= 1``,
    which keeps the result in [0, 1].  The boost applies at every Jaro
    score, with no 0.7 threshold.
    """
    sim = _jaro_similarity(left, right)
    prefix = min(Prefix.similarity(left, right), config.winkler_max_prefix)
    boosted = sim + prefix * config.winkler_prefix_weight * (1.0 - sim)
    return Measurement(value=boosted, is_distance=False)
