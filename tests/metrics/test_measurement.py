"""Tests for the Measurement frozen dataclass.

Covers:
- raw returns the natural-scale value unchanged
- distance/similarity views for both directions
- normalized keeps the metric's own direction
- maximum == 0 conventions (distance 0.0, similarity 1.0)
- Immutability
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from str_similarity.metrics.measurement import Measurement


class TestDistanceMeasurement:
    def test_raw(self) -> None:
        assert Measurement(value=2, is_distance=True, maximum=8).raw == 2

    def test_views(self) -> None:
        m = Measurement(value=2, is_distance=True, maximum=8)
        assert m.distance == 2
        assert m.similarity == 6

    def test_normalized_is_distance(self) -> None:
        m = Measurement(value=2, is_distance=True, maximum=8)
        assert m.normalized == pytest.approx(0.25)
        assert m.normalized_similarity == pytest.approx(0.75)

    def test_zero_maximum(self) -> None:
        m = Measurement(value=0, is_distance=True, maximum=0)
        assert m.normalized == 0.0


class TestSimilarityMeasurement:
    def test_views(self) -> None:
        m = Measurement(value=3, is_distance=False, maximum=4)
        assert m.similarity == 3
        assert m.distance == 1

    def test_normalized_is_similarity(self) -> None:
        m = Measurement(value=3, is_distance=False, maximum=4)
        assert m.normalized == pytest.approx(0.75)
        assert m.normalized_distance == pytest.approx(0.25)

    def test_zero_maximum(self) -> None:
        m = Measurement(value=0, is_distance=False, maximum=0)
        assert m.normalized == 1.0

    def test_ratio_default_maximum(self) -> None:
        m = Measurement(value=0.4, is_distance=False)
        assert m.maximum == 1.0
        assert m.normalized == pytest.approx(0.4)


def test_is_frozen() -> None:
    m = Measurement(value=1, is_distance=True, maximum=2)
    with pytest.raises(FrozenInstanceError):
        m.value = 3  # type: ignore[misc]
