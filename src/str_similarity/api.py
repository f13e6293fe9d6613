"""Public API functions for str-similarity.

This module provides the three user-facing functions: list_algorithms,
compute_one, and compute_all.  Each computing call creates a fresh
SimilarityComparator to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from str_similarity.catalog import Algorithm
from str_similarity.catalog import list_algorithms as _catalog_rows
from str_similarity.comparator import SimilarityComparator
from str_similarity.config import MetricConfig
from str_similarity.result import ComputationResult, Report

__all__ = ["compute_all", "compute_one", "list_algorithms"]


def list_algorithms() -> list[tuple[str, str]]:
    """Return every supported algorithm as ``(canonical_name, alias)``.

    Returns:
        25 rows in the fixed catalog order (not alphabetical).
    """
    return _catalog_rows()


def compute_one(
    algorithm: str | Algorithm,
    left: str,
    right: str,
    normalize: bool = False,
    config: MetricConfig | None = None,
    strict: bool = False,
) -> ComputationResult:
    """Compare two strings with a single algorithm.

    Args:
        algorithm: Canonical name or alias, matched case-insensitively.
                   Unknown identifiers fall back to ``levenshtein`` unless
                   ``strict`` is set.
        left:      First operand.  Order matters for asymmetric metrics.
        right:     Second operand.
        normalize: Rescale the result by the metric's own maximum.
        config:    Metric parameters.  Defaults to ``MetricConfig()`` when None.
        strict:    Raise ``UnknownAlgorithmError`` for unknown identifiers.

    Returns:
        ``int`` when the result is integral, ``float`` otherwise.
    """
    comparator = SimilarityComparator(config=config, strict=strict)
    return comparator.compute_one(algorithm, left, right, normalize)


def compute_all(
    left: str,
    right: str,
    normalize: bool = False,
    config: MetricConfig | None = None,
) -> Report:
    """Compare two strings with every algorithm in the catalog.

    Args:
        left:      First operand.
        right:     Second operand.
        normalize: Rescale every result by its metric's own maximum.
        config:    Metric parameters.  Defaults to ``MetricConfig()`` when None.

    Returns:
        ``[(canonical_name, result), ...]``: exactly 25 rows in catalog order,
        each result coerced independently.
    """
    comparator = SimilarityComparator(config=config)
    return comparator.compute_all(left, right, normalize)
