"""pytest plugin for str-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from str_similarity.catalog import Algorithm
from str_similarity.comparator import SimilarityComparator
from str_similarity.config import MetricConfig
from str_similarity.dispatcher import measure


@pytest.fixture(scope="session")
def assert_strings_similar() -> Any:
    """Fixture that returns a callable string similarity asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_greeting(assert_strings_similar):
            assert_strings_similar("Hello, world", "Hello world")

        def test_typo_tolerance(assert_strings_similar):
            assert_strings_similar("color", "colour", algorithm="lev", threshold=0.8)

    Returns:
        A callable ``_assert(actual, expected, algorithm="jaro_winkler",
        threshold=0.85, config=None) -> None`` that raises ``AssertionError``
        when the normalized similarity is below ``threshold``.  Distance
        metrics are compared as ``1 - normalized distance``.
    """

    def _assert(
        actual: str,
        expected: str,
        algorithm: str | Algorithm = Algorithm.JARO_WINKLER,
        threshold: float = 0.85,
        config: MetricConfig | None = None,
    ) -> None:
        """Assert that two strings are similar under ``algorithm``.

        Raises:
            AssertionError: When similarity < threshold, with a message
                including the score, threshold, algorithm, and both strings.
            UnknownAlgorithmError: When ``algorithm`` is not in the catalog.
        """
        resolved = SimilarityComparator(strict=True).resolve(algorithm)
        score = measure(resolved, actual, expected, config).normalized_similarity
        if score < threshold:
            raise AssertionError(
                f"strings not similar: "
                f"similarity={score:.4f} < threshold={threshold} ({resolved})\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
