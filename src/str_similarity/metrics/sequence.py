"""Sequence-alignment metrics: Ratcliff-Obershelp, Smith-Waterman, Sift4.

- ``ratcliff_obershelp``: Gestalt pattern matching as implemented by
  ``difflib.SequenceMatcher``.  Similarity ``2M / (|a| + |b|)``.
- ``smith_waterman``: local-alignment score table; the score of the final
  cell is reported, as a similarity bounded by the longer input.
- ``sift4_simple`` / ``sift4_common``: Siderite Zackwehdex's Sift4 edit
  distance approximation.  Both walk the strings with two cursors and a
  bounded look-ahead (``config.sift4_max_offset``); the common variant also
  tracks transpositions through a list of recent match offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import TYPE_CHECKING

from str_similarity.metrics.measurement import Measurement

if TYPE_CHECKING:
    from str_similarity.config import MetricConfig

__all__ = [
    "ratcliff_obershelp",
    "sift4_common",
    "sift4_simple",
    "smith_waterman",
]


# ---------------------------------------------------------------------------
# Ratcliff-Obershelp
# ---------------------------------------------------------------------------


def ratcliff_obershelp(left: str, right: str, config: MetricConfig) -> Measurement:
    if not left and not right:
        return Measurement(value=1.0, is_distance=False)
    # autojunk would drop frequent characters from inputs of 200+ characters
    ratio = SequenceMatcher(None, left, right, autojunk=False).ratio()
    return Measurement(value=ratio, is_distance=False)


# ---------------------------------------------------------------------------
# Smith-Waterman
# ---------------------------------------------------------------------------


def smith_waterman(left: str, right: str, config: MetricConfig) -> Measurement:
    """Smith-Waterman local alignment score.

    ``H[i][j] = max(0, H[i-1][j-1] + s(a_i, b_j), H[i-1][j] - g, H[i][j-1] - g)``
    with ``s`` = match/mismatch score and ``g`` = gap cost from ``config``.
    Only the previous row of ``H`` is kept.
    """
    gap = config.smith_waterman_gap_cost
    match = config.smith_waterman_match_score
    mismatch = config.smith_waterman_mismatch_score

    prev_row = [0] * (len(right) + 1)
    for ch_a in left:
        curr_row = [0] * (len(right) + 1)
        for j, ch_b in enumerate(right):
            step = match if ch_a == ch_b else mismatch
            curr_row[j + 1] = max(
                0,
                prev_row[j] + step,
                prev_row[j + 1] - gap,
                curr_row[j] - gap,
            )
        prev_row = curr_row

    best_possible = max(len(left), len(right)) * max(match, 1)
    return Measurement(
        value=prev_row[len(right)], is_distance=False, maximum=best_possible
    )


# ---------------------------------------------------------------------------
# Sift4
# ---------------------------------------------------------------------------


def _sift4_simple_distance(a: str, b: str, max_offset: int) -> int:
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    c1 = c2 = 0
    lcss = 0
    local_cs = 0
    while c1 < len_a and c2 < len_b:
        if a[c1] == b[c2]:
            local_cs += 1
        else:
            lcss += local_cs
            local_cs = 0
            if c1 != c2:
                c1 = c2 = max(c1, c2)
            for offset in range(max_offset):
                if not (c1 + offset < len_a or c2 + offset < len_b):
                    break
                if c1 + offset < len_a and c2 < len_b and a[c1 + offset] == b[c2]:
                    c1 += offset
                    local_cs += 1
                    break
                if c2 + offset < len_b and c1 < len_a and a[c1] == b[c2 + offset]:
                    c2 += offset
                    local_cs += 1
                    break
        c1 += 1
        c2 += 1
    lcss += local_cs
    return max(len_a, len_b) - lcss


@dataclass(slots=True)
class _MatchOffset:
    c1: int
    c2: int
    trans: bool


def _sift4_common_distance(a: str, b: str, max_offset: int) -> int:
    len_a, len_b = len(a), len(b)
    if len_a == 0:
        return len_b
    if len_b == 0:
        return len_a

    c1 = c2 = 0
    lcss = 0
    local_cs = 0
    trans = 0
    offsets: list[_MatchOffset] = []

    while c1 < len_a and c2 < len_b:
        if a[c1] == b[c2]:
            local_cs += 1
            is_trans = False
            i = 0
            while i < len(offsets):
                ofs = offsets[i]
                if c1 <= ofs.c1 or c2 <= ofs.c2:
                    is_trans = abs(c2 - c1) >= abs(ofs.c2 - ofs.c1)
                    if is_trans:
                        trans += 1
                    elif not ofs.trans:
                        ofs.trans = True
                        trans += 1
                    break
                if c1 > ofs.c2 and c2 > ofs.c1:
                    del offsets[i]
                else:
                    i += 1
            offsets.append(_MatchOffset(c1, c2, is_trans))
        else:
            lcss += local_cs
            local_cs = 0
            if c1 != c2:
                c1 = c2 = min(c1, c2)
            for offset in range(max_offset):
                if not (c1 + offset < len_a or c2 + offset < len_b):
                    break
                if c1 + offset < len_a and a[c1 + offset] == b[c2]:
                    c1 += offset - 1
                    c2 -= 1
                    break
                if c2 + offset < len_b and a[c1] == b[c2 + offset]:
                    c1 -= 1
                    c2 += offset - 1
                    break
        c1 += 1
        c2 += 1
        # A match on the last character of either string must still be
        # folded into lcss before the loop condition fails.
        if c1 >= len_a or c2 >= len_b:
            lcss += local_cs
            local_cs = 0
            c1 = c2 = min(c1, c2)

    lcss += local_cs
    return max(len_a, len_b) - lcss + trans


def sift4_simple(left: str, right: str, config: MetricConfig) -> Measurement:
    return Measurement(
        value=_sift4_simple_distance(left, right, config.sift4_max_offset),
        is_distance=True,
        maximum=max(len(left), len(right)),
    )


def sift4_common(left: str, right: str, config: MetricConfig) -> Measurement:
    """Sift4 with transposition counting (the "common" published variant)."""
    return Measurement(
        value=_sift4_common_distance(left, right, config.sift4_max_offset),
        is_distance=True,
        maximum=max(len(left), len(right)),
    )
