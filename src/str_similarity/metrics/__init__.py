"""metrics subpackage: the 25 string metrics of the catalog.

Every metric shares one signature::

    metric(left: str, right: str, config: MetricConfig) -> Measurement

and is a pure function of its arguments.  The ``Measurement`` carries both
the raw value and enough context to derive the normalized value, so a single
call serves both computation modes.

Example::

    from str_similarity.config import MetricConfig
    from str_similarity.metrics import levenshtein

    m = levenshtein("kitten", "sitting", MetricConfig())
    m.raw          # 3
    m.normalized   # 3 / 7
"""

from __future__ import annotations

from str_similarity.metrics.edit import (
    damerau_levenshtein,
    hamming,
    jaro,
    jaro_winkler,
    length,
    levenshtein,
    longest_common_subsequence,
    longest_common_substring,
    yujian_bo,
)
from str_similarity.metrics.measurement import Measurement
from str_similarity.metrics.sequence import (
    ratcliff_obershelp,
    sift4_common,
    sift4_simple,
    smith_waterman,
)
from str_similarity.metrics.simple import lig3, mlipns, prefix, suffix
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

__all__ = [
    "Measurement",
    "bag",
    "cosine",
    "damerau_levenshtein",
    "entropy_ncd",
    "hamming",
    "jaccard",
    "jaro",
    "jaro_winkler",
    "length",
    "levenshtein",
    "lig3",
    "longest_common_subsequence",
    "longest_common_substring",
    "mlipns",
    "overlap",
    "prefix",
    "ratcliff_obershelp",
    "roberts",
    "sift4_common",
    "sift4_simple",
    "smith_waterman",
    "sorensen_dice",
    "suffix",
    "tversky",
    "yujian_bo",
]
