"""Measurement: the raw/normalized pair every metric produces.

A metric reports three things: the value in its natural scale, whether that
value is a distance (0 = identical) or a similarity (larger = closer), and
the largest value it could have taken for the given inputs.  Normalization
is derived from those three fields and keeps the metric's own direction::

    distance metric:    normalized = value / maximum
    similarity metric:  normalized = value / maximum

When ``maximum == 0`` (both inputs empty) the normalized distance is 0.0 and
the normalized similarity is 1.0.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Measurement"]


@dataclass(frozen=True, slots=True)
class Measurement:
    """Outcome of one metric applied to one string pair.

    Attributes:
        value: Natural-scale result (edit count, match length, or ratio).
        is_distance: True when ``value`` grows as the strings diverge.
        maximum: Upper bound of ``value`` for these inputs.  Ratio metrics
            use 1.0; count metrics use the longer input length.
    """

    value: float
    is_distance: bool
    maximum: float = 1.0

    @property
    def raw(self) -> float:
        """The natural-scale value, unchanged."""
        return self.value

    @property
    def distance(self) -> float:
        return self.value if self.is_distance else self.maximum - self.value

    @property
    def similarity(self) -> float:
        return self.maximum - self.value if self.is_distance else self.value

    @property
    def normalized_distance(self) -> float:
        if self.maximum == 0:
            return 0.0
        return self.distance / self.maximum

    @property
    def normalized_similarity(self) -> float:
        if self.maximum == 0:
            return 1.0
        return self.similarity / self.maximum

    @property
    def normalized(self) -> float:
        """The value rescaled by ``maximum``, in the metric's own direction."""
        if self.is_distance:
            return self.normalized_distance
        return self.normalized_similarity
