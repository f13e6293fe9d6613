"""Route an ``Algorithm`` to its metric implementation.

``measure`` is an exhaustive ``match`` over the closed ``Algorithm`` enum;
``assert_never`` makes a type checker flag any member added to the enum but
not routed here.  ``compute`` picks the raw or normalized view of the
resulting ``Measurement``.
"""

from __future__ import annotations

from typing import assert_never

from str_similarity import metrics
from str_similarity.catalog import Algorithm
from str_similarity.config import MetricConfig
from str_similarity.metrics import Measurement

__all__ = ["compute", "measure"]

_DEFAULT_CONFIG = MetricConfig()


def measure(
    algorithm: Algorithm,
    left: str,
    right: str,
    config: MetricConfig | None = None,
) -> Measurement:
    """Run ``algorithm`` on ``(left, right)`` and return the full measurement.

    Operand order is passed through untouched.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG

    match algorithm:
        case Algorithm.BAG:
            return metrics.bag(left, right, cfg)
        case Algorithm.COSINE:
            return metrics.cosine(left, right, cfg)
        case Algorithm.DAMERAU_LEVENSHTEIN:
            return metrics.damerau_levenshtein(left, right, cfg)
        case Algorithm.ENTROPY_NCD:
            return metrics.entropy_ncd(left, right, cfg)
        case Algorithm.HAMMING:
            return metrics.hamming(left, right, cfg)
        case Algorithm.JACCARD:
            return metrics.jaccard(left, right, cfg)
        case Algorithm.JARO:
            return metrics.jaro(left, right, cfg)
        case Algorithm.JARO_WINKLER:
            return metrics.jaro_winkler(left, right, cfg)
        case Algorithm.LEVENSHTEIN:
            return metrics.levenshtein(left, right, cfg)
        case Algorithm.LONGEST_COMMON_SUBSEQUENCE:
            return metrics.longest_common_subsequence(left, right, cfg)
        case Algorithm.LONGEST_COMMON_SUBSTRING:
            return metrics.longest_common_substring(left, right, cfg)
        case Algorithm.LENGTH:
            return metrics.length(left, right, cfg)
        case Algorithm.LIG3:
            return metrics.lig3(left, right, cfg)
        case Algorithm.MLIPNS:
            return metrics.mlipns(left, right, cfg)
        case Algorithm.OVERLAP:
            return metrics.overlap(left, right, cfg)
        case Algorithm.PREFIX:
            return metrics.prefix(left, right, cfg)
        case Algorithm.RATCLIFF_OBERSHELP:
            return metrics.ratcliff_obershelp(left, right, cfg)
        case Algorithm.ROBERTS:
            return metrics.roberts(left, right, cfg)
        case Algorithm.SIFT4_COMMON:
            return metrics.sift4_common(left, right, cfg)
        case Algorithm.SIFT4_SIMPLE:
            return metrics.sift4_simple(left, right, cfg)
        case Algorithm.SMITH_WATERMAN:
            return metrics.smith_waterman(left, right, cfg)
        case Algorithm.SORENSEN_DICE:
            return metrics.sorensen_dice(left, right, cfg)
        case Algorithm.SUFFIX:
            return metrics.suffix(left, right, cfg)
        case Algorithm.TVERSKY:
            return metrics.tversky(left, right, cfg)
        case Algorithm.YUJIAN_BO:
            return metrics.yujian_bo(left, right, cfg)
        case _:
            assert_never(algorithm)


def compute(
    algorithm: Algorithm,
    left: str,
    right: str,
    normalize: bool,
    config: MetricConfig | None = None,
) -> float:
    """Return the raw value, or the normalized value when ``normalize`` is set."""
    result = measure(algorithm, left, right, config)
    return result.normalized if normalize else result.raw
