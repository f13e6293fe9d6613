"""MetricConfig: tunable parameters for the similarity metric catalog.

MetricConfig is a frozen (immutable) dataclass holding the handful of
constants that the published algorithm definitions leave open.  The
defaults reproduce those definitions exactly, so ``MetricConfig()`` is what
every catalog lookup uses unless a caller supplies its own instance.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MetricConfig"]


@dataclass(frozen=True, slots=True)
class MetricConfig:
    """Immutable configuration for the metric implementations.

    Attributes:
        winkler_prefix_weight: Jaro-Winkler scaling factor for the common
            prefix bonus.  Must satisfy ``weight * max_prefix <= 1``.
        winkler_max_prefix: Longest common prefix rewarded by Jaro-Winkler.
        sift4_max_offset: Look-ahead window of both Sift4 variants (> 0).
        tversky_alpha: Tversky weight of characters only in the left string.
        tversky_beta: Tversky weight of characters only in the right string.
        mlipns_threshold: Hamming ratio at or below which MLIPNS reports a
            match.  In [0, 1].
        mlipns_max_mismatches: Mismatches MLIPNS may forgive (>= 0).
        smith_waterman_gap_cost: Penalty for opening a gap (>= 0).
        smith_waterman_match_score: Score of an aligned equal pair.
        smith_waterman_mismatch_score: Score of an aligned unequal pair.
        entropy_base: Logarithm base of the entropy compressor (> 1).
        entropy_coef: Constant added to every compressed size (>= 0).
    """

    winkler_prefix_weight: float = 0.1
    winkler_max_prefix: int = 4
    sift4_max_offset: int = 5
    tversky_alpha: float = 1.0
    tversky_beta: float = 1.0
    mlipns_threshold: float = 0.25
    mlipns_max_mismatches: int = 2
    smith_waterman_gap_cost: int = 1
    smith_waterman_match_score: int = 1
    smith_waterman_mismatch_score: int = 0
    entropy_base: float = 2.0
    entropy_coef: float = 1.0

    def __post_init__(self) -> None:
        if self.winkler_prefix_weight < 0.0:
            msg = (
                "winkler_prefix_weight must be >= 0.0, got "
                f"{self.winkler_prefix_weight}"
            )
            raise ValueError(msg)
        if self.winkler_max_prefix < 0:
            msg = f"winkler_max_prefix must be >= 0, got {self.winkler_max_prefix}"
            raise ValueError(msg)
        if self.winkler_prefix_weight * self.winkler_max_prefix > 1.0:
            msg = (
                "winkler_prefix_weight * winkler_max_prefix must be <= 1.0, got "
                f"{self.winkler_prefix_weight * self.winkler_max_prefix}"
            )
            raise ValueError(msg)
        if self.sift4_max_offset < 1:
            msg = f"sift4_max_offset must be >= 1, got {self.sift4_max_offset}"
            raise ValueError(msg)
        if self.tversky_alpha < 0.0 or self.tversky_beta < 0.0:
            msg = (
                "tversky weights must be >= 0.0, got "
                f"alpha={self.tversky_alpha}, beta={self.tversky_beta}"
            )
            raise ValueError(msg)
        if not 0.0 <= self.mlipns_threshold <= 1.0:
            msg = f"mlipns_threshold must be in [0, 1], got {self.mlipns_threshold}"
            raise ValueError(msg)
        if self.mlipns_max_mismatches < 0:
            msg = (
                "mlipns_max_mismatches must be >= 0, got "
                f"{self.mlipns_max_mismatches}"
            )
            raise ValueError(msg)
        if self.smith_waterman_gap_cost < 0:
            msg = (
                "smith_waterman_gap_cost must be >= 0, got "
                f"{self.smith_waterman_gap_cost}"
            )
            raise ValueError(msg)
        if self.entropy_base <= 1.0:
            msg = f"entropy_base must be > 1.0, got {self.entropy_base}"
            raise ValueError(msg)
        if self.entropy_coef < 0.0:
            msg = f"entropy_coef must be >= 0.0, got {self.entropy_coef}"
            raise ValueError(msg)
