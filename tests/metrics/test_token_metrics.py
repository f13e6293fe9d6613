"""Tests for the token (character multiset) metrics.

Covers:
- Bag distance on multisets, raw and normalized
- Jaccard, Sorensen-Dice, cosine, overlap reference ratios
- Tversky: equals Jaccard by default, Dice at alpha=beta=0.5, asymmetric
  with unequal weights
- Roberts weighted agreement
- Entropy NCD: identity, disjoint single-symbol strings, empty strings
- Empty conventions: both empty -> 1.0 similarity, one empty -> 0.0
"""

from __future__ import annotations

import pytest

from str_similarity.config import MetricConfig
from str_similarity.metrics.token import (
    bag,
    cosine,
    entropy_ncd,
    jaccard,
    overlap,
    roberts,
    sorensen_dice,
    tversky,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> MetricConfig:
    return MetricConfig()


RATIO_METRICS = [jaccard, sorensen_dice, cosine, overlap, tversky, roberts]


# ---------------------------------------------------------------------------
# Bag
# ---------------------------------------------------------------------------


class TestBag:
    def test_single_difference(self, config: MetricConfig) -> None:
        assert bag("abc", "abd", config).raw == 1

    def test_counts_multiplicity(self, config: MetricConfig) -> None:
        assert bag("aab", "abb", config).raw == 1
        assert bag("aaaa", "a", config).raw == 3

    def test_normalized(self, config: MetricConfig) -> None:
        assert bag("abc", "", config).normalized == 1.0
        assert bag("abc", "abd", config).normalized == pytest.approx(1 / 3)

    def test_both_empty(self, config: MetricConfig) -> None:
        m = bag("", "", config)
        assert m.raw == 0
        assert m.normalized == 0.0

    def test_order_insensitive(self, config: MetricConfig) -> None:
        assert bag("abc", "cba", config).raw == 0


# ---------------------------------------------------------------------------
# Overlap ratios
# ---------------------------------------------------------------------------


class TestOverlapRatios:
    def test_jaccard(self, config: MetricConfig) -> None:
        assert jaccard("abc", "abd", config).raw == pytest.approx(0.5)
        assert jaccard("aab", "ab", config).raw == pytest.approx(2 / 3)

    def test_sorensen_dice(self, config: MetricConfig) -> None:
        assert sorensen_dice("abc", "abd", config).raw == pytest.approx(4 / 6)

    def test_cosine(self, config: MetricConfig) -> None:
        assert cosine("abc", "abd", config).raw == pytest.approx(2 / 3)

    def test_overlap_subset_is_one(self, config: MetricConfig) -> None:
        assert overlap("ab", "abc", config).raw == pytest.approx(1.0)

    @pytest.mark.parametrize("metric", RATIO_METRICS)
    def test_both_empty_is_one(self, metric, config: MetricConfig) -> None:  # type: ignore[no-untyped-def]
        assert metric("", "", config).raw == 1.0

    @pytest.mark.parametrize("metric", RATIO_METRICS)
    def test_one_empty_is_zero(self, metric, config: MetricConfig) -> None:  # type: ignore[no-untyped-def]
        assert metric("abc", "", config).raw == 0.0
        assert metric("", "abc", config).raw == 0.0

    @pytest.mark.parametrize("metric", RATIO_METRICS)
    def test_identical_is_one(self, metric, config: MetricConfig) -> None:  # type: ignore[no-untyped-def]
        assert metric("hello", "hello", config).raw == pytest.approx(1.0)

    @pytest.mark.parametrize("metric", RATIO_METRICS)
    def test_raw_equals_normalized(self, metric, config: MetricConfig) -> None:  # type: ignore[no-untyped-def]
        m = metric("night", "nacht", config)
        assert m.raw == m.normalized


# ---------------------------------------------------------------------------
# Tversky
# ---------------------------------------------------------------------------


class TestTversky:
    def test_default_equals_jaccard(self, config: MetricConfig) -> None:
        assert tversky("night", "nacht", config).raw == pytest.approx(
            jaccard("night", "nacht", config).raw
        )

    def test_half_weights_equal_dice(self) -> None:
        cfg = MetricConfig(tversky_alpha=0.5, tversky_beta=0.5)
        assert tversky("abc", "abd", cfg).raw == pytest.approx(
            sorensen_dice("abc", "abd", cfg).raw
        )

    def test_unequal_weights_are_asymmetric(self) -> None:
        cfg = MetricConfig(tversky_alpha=1.0, tversky_beta=0.0)
        assert tversky("ab", "abcd", cfg).raw == pytest.approx(1.0)
        assert tversky("abcd", "ab", cfg).raw == pytest.approx(0.5)


# ---------------------------------------------------------------------------
# Roberts
# ---------------------------------------------------------------------------


class TestRoberts:
    def test_weighted_agreement(self, config: MetricConfig) -> None:
        # a: (2+1) * 1/2 = 1.5, b: (1+1) * 1 = 2  ->  3.5 / 5
        assert roberts("aab", "ab", config).raw == pytest.approx(0.7)

    def test_disjoint_is_zero(self, config: MetricConfig) -> None:
        assert roberts("ab", "cd", config).raw == 0.0


# ---------------------------------------------------------------------------
# Entropy NCD
# ---------------------------------------------------------------------------


class TestEntropyNCD:
    def test_identical_is_zero(self, config: MetricConfig) -> None:
        assert entropy_ncd("hello", "hello", config).raw == pytest.approx(0.0)

    def test_both_empty_is_zero(self, config: MetricConfig) -> None:
        assert entropy_ncd("", "", config).raw == 0.0

    def test_disjoint_single_symbol_strings(self, config: MetricConfig) -> None:
        # C(aaa) = C(bbb) = 1 + 0 bits, C(aaabbb) = 1 + 1 bit
        assert entropy_ncd("aaa", "bbb", config).raw == pytest.approx(1.0)

    def test_is_distance(self, config: MetricConfig) -> None:
        m = entropy_ncd("abc", "abd", config)
        assert m.is_distance is True
        assert m.raw > 0.0

    def test_symmetric(self, config: MetricConfig) -> None:
        assert entropy_ncd("night", "nacht", config).raw == pytest.approx(
            entropy_ncd("nacht", "night", config).raw
        )
