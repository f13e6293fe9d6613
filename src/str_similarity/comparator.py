"""SimilarityComparator: orchestrator that wires Resolver + Dispatcher + coercion.

This is the central wiring layer between the metric implementations and the
public API.  It turns an algorithm identifier and a string pair into a
coerced result, and runs the whole catalog for "compute all" reports.

Architecture:
- compute_one() resolves the identifier (fallback or strict, per instance),
  dispatches once, and coerces the value.
- compute_all() walks ``CATALOG`` in order, dispatching once per entry with
  the same operands and normalize flag, coercing each row independently.
  There is no partial-failure path: the report always has one row per entry.
- The comparator holds only immutable configuration, so one instance can be
  shared freely, including across threads.
"""

from __future__ import annotations

import logging

from str_similarity.catalog import CATALOG, Algorithm, list_algorithms
from str_similarity.config import MetricConfig
from str_similarity.dispatcher import compute
from str_similarity.resolver import resolve, resolve_strict
from str_similarity.result import (
    ComputationRequest,
    ComputationResult,
    Report,
    coerce,
)

__all__ = ["SimilarityComparator"]

logger = logging.getLogger(__name__)


class SimilarityComparator:
    """Orchestrator for string similarity computation.

    Example::

        from str_similarity.comparator import SimilarityComparator

        cmp = SimilarityComparator()
        cmp.compute_one("lev", "kitten", "sitting")          # 3
        cmp.compute_one("jaro_winkler", "martha", "marhta")  # 0.9611...
        rows = cmp.compute_all("abc", "abd", normalize=True)
        rows[0]                                              # ("bag", 0.3333...)
    """

    def __init__(
        self,
        config: MetricConfig | None = None,
        strict: bool = False,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Metric parameters.  Defaults to ``MetricConfig()``.
            strict: When True, unknown algorithm identifiers raise
                ``UnknownAlgorithmError`` instead of falling back to
                Levenshtein.
        """
        self._config: MetricConfig = config if config is not None else MetricConfig()
        self._strict = strict

    @property
    def config(self) -> MetricConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, identifier: str | Algorithm) -> Algorithm:
        """Map an identifier to an ``Algorithm`` using this instance's policy."""
        if isinstance(identifier, Algorithm):
            return identifier
        if self._strict:
            return resolve_strict(identifier)
        return resolve(identifier)

    def compute_one(
        self,
        algorithm: str | Algorithm,
        left: str,
        right: str,
        normalize: bool = False,
    ) -> ComputationResult:
        """Compute one metric for ``(left, right)`` and coerce the result.

        Args:
            algorithm: Canonical name, alias (any case), or ``Algorithm``.
            left:      First operand.
            right:     Second operand.
            normalize: Return the normalized value instead of the raw one.

        Returns:
            ``int`` when the value is integral, ``float`` otherwise.
        """
        resolved = self.resolve(algorithm)
        value = compute(resolved, left, right, normalize, self._config)
        logger.debug(
            "%s(%r, %r, normalize=%s) = %r", resolved, left, right, normalize, value
        )
        return coerce(value)

    def compare(
        self, algorithm: str | Algorithm, request: ComputationRequest
    ) -> ComputationResult:
        """``compute_one`` for a prepared ``ComputationRequest``."""
        return self.compute_one(
            algorithm, request.left, request.right, request.normalize
        )

    def compute_all(self, left: str, right: str, normalize: bool = False) -> Report:
        """Run every catalog algorithm on ``(left, right)``.

        Returns:
            ``[(canonical_name, result), ...]`` with exactly one row per
            catalog entry, in catalog order.
        """
        report: Report = []
        for entry in CATALOG:
            value = compute(entry.algorithm, left, right, normalize, self._config)
            report.append((entry.name, coerce(value)))
        logger.debug(
            "compute_all(%r, %r, normalize=%s): %d rows",
            left,
            right,
            normalize,
            len(report),
        )
        return report

    def list_algorithms(self) -> list[tuple[str, str]]:
        """``(canonical_name, alias)`` rows in catalog order."""
        return list_algorithms()
