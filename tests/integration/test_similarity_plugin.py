"""Integration tests for the str-similarity pytest plugin.

These tests verify that the assert_strings_similar fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require str-similarity to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from str_similarity import Algorithm, MetricConfig, UnknownAlgorithmError


def test_fixture_passes_similar_strings(assert_strings_similar: Any) -> None:
    """A single dropped letter stays above the default Jaro-Winkler threshold."""
    assert_strings_similar("nutshell", "nushell")


def test_fixture_fails_dissimilar_strings(assert_strings_similar: Any) -> None:
    with pytest.raises(AssertionError, match=r"similarity="):
        assert_strings_similar("nutshell", "xyz")


def test_fixture_custom_threshold(assert_strings_similar: Any) -> None:
    # threshold=0.0 means any score passes
    assert_strings_similar("abc", "xyz", threshold=0.0)

    with pytest.raises(AssertionError, match=r"similarity="):
        assert_strings_similar("abc", "abd", threshold=1.0)


def test_fixture_distance_metric(assert_strings_similar: Any) -> None:
    """Distance metrics are scored as ``1 - normalized distance``."""
    # lev = 1 over 8 characters -> 0.875
    assert_strings_similar("nutshell", "nushell", algorithm="lev", threshold=0.85)
    with pytest.raises(AssertionError):
        assert_strings_similar("nutshell", "nushell", algorithm="lev", threshold=0.9)


def test_fixture_enum_algorithm(assert_strings_similar: Any) -> None:
    assert_strings_similar("hello", "hello", algorithm=Algorithm.HAMMING, threshold=1.0)


def test_fixture_custom_config(assert_strings_similar: Any) -> None:
    """Custom MetricConfig parameter should be forwarded to the metric."""
    cfg = MetricConfig(tversky_alpha=1.0, tversky_beta=0.0)
    assert_strings_similar("ab", "abcd", algorithm="tv", threshold=1.0, config=cfg)


def test_fixture_rejects_unknown_algorithm(assert_strings_similar: Any) -> None:
    with pytest.raises(UnknownAlgorithmError):
        assert_strings_similar("a", "a", algorithm="nope")


def test_fixture_error_message_contents(assert_strings_similar: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_strings_similar("nutshell", "xyz")

    error_message = str(exc_info.value)
    assert "similarity=" in error_message
    assert "threshold=" in error_message
    assert "jaro_winkler" in error_message
    assert "'nutshell'" in error_message
    assert "'xyz'" in error_message


def test_fixture_returns_callable(assert_strings_similar: Any) -> None:
    assert callable(assert_strings_similar), (
        "assert_strings_similar fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_strings_similar appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_strings_similar" in result.stdout, (
        f"assert_strings_similar not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
