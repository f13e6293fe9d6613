"""Simple and composite metrics: prefix, suffix, MLIPNS, LIG3."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rapidfuzz.distance import Postfix, Prefix

from str_similarity.metrics.edit import hamming_distance, levenshtein_distance
from str_similarity.metrics.measurement import Measurement

if TYPE_CHECKING:
    from str_similarity.config import MetricConfig

__all__ = ["lig3", "mlipns", "prefix", "suffix"]


def prefix(left: str, right: str, config: MetricConfig) -> Measurement:
    """Length of the prefix ``left`` and ``right`` have in common."""
    return Measurement(
        value=Prefix.similarity(left, right),
        is_distance=False,
        maximum=max(len(left), len(right)),
    )


def suffix(left: str, right: str, config: MetricConfig) -> Measurement:
    """Length of the suffix ``left`` and ``right`` have in common."""
    return Measurement(
        value=Postfix.similarity(left, right),
        is_distance=False,
        maximum=max(len(left), len(right)),
    )


def mlipns(left: str, right: str, config: MetricConfig) -> Measurement:
    """Modified Language-Independent Product Name Search.

    Binary similarity: 1 when the Hamming mismatch ratio drops to
    ``config.mlipns_threshold`` or below after forgiving at most
    ``config.mlipns_max_mismatches`` mismatches (each forgiven mismatch
    removes one position from both the mismatch count and the length),
    0 otherwise.  Two empty strings match; one empty string never does.
    """
    mismatches = hamming_distance(left, right)
    longest = max(len(left), len(right))
    if longest == 0:
        return Measurement(value=1, is_distance=False)
    if not left or not right:
        return Measurement(value=0, is_distance=False)

    for _ in range(config.mlipns_max_mismatches + 1):
        if longest == 0 or mismatches / longest <= config.mlipns_threshold:
            return Measurement(value=1, is_distance=False)
        mismatches -= 1
        longest -= 1

    return Measurement(value=1 if longest == 0 else 0, is_distance=False)


def lig3(left: str, right: str, config: MetricConfig) -> Measurement:
    """LIG3 similarity: ``2I / (2I + C)``.

    ``I`` is the Levenshtein similarity (``max(|a|, |b|) - lev``) and ``C``
    the padded Hamming distance.  Two empty strings score 1.0.
    """
    identical = max(len(left), len(right)) - levenshtein_distance(left, right)
    changed = hamming_distance(left, right)
    if identical == 0 and changed == 0:
        return Measurement(value=1.0, is_distance=False)
    return Measurement(
        value=2 * identical / (2 * identical + changed), is_distance=False
    )
