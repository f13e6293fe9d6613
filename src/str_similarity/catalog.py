"""Algorithm StrEnum and the fixed, ordered algorithm catalog.

``Algorithm`` is the closed set of supported metrics; its value is the
canonical name.  ``CATALOG`` pairs every member with its short alias in the
fixed display order used by both ``list_algorithms`` and ``compute_all``
reports.  The catalog is built once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["CATALOG", "Algorithm", "CatalogEntry", "entry_for", "list_algorithms"]


class Algorithm(StrEnum):
    """The 25 supported string metrics, valued by canonical name."""

    BAG = "bag"
    COSINE = "cosine"
    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    ENTROPY_NCD = "entropy_ncd"
    HAMMING = "hamming"
    JACCARD = "jaccard"
    JARO = "jaro"
    JARO_WINKLER = "jaro_winkler"
    LEVENSHTEIN = "levenshtein"
    LONGEST_COMMON_SUBSEQUENCE = "longest_common_subsequence"
    LONGEST_COMMON_SUBSTRING = "longest_common_substring"
    LENGTH = "length"
    LIG3 = "lig3"
    MLIPNS = "mlipns"
    OVERLAP = "overlap"
    PREFIX = "prefix"
    RATCLIFF_OBERSHELP = "ratcliff_obershelp"
    ROBERTS = "roberts"
    SIFT4_COMMON = "sift4_common"
    SIFT4_SIMPLE = "sift4_simple"
    SMITH_WATERMAN = "smith_waterman"
    SORENSEN_DICE = "sorensen_dice"
    SUFFIX = "suffix"
    TVERSKY = "tversky"
    YUJIAN_BO = "yujian_bo"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One catalog row.

    Attributes:
        algorithm: The ``Algorithm`` member this row describes.
        alias:     Short lowercase alias accepted by the resolver.
    """

    algorithm: Algorithm
    alias: str

    @property
    def name(self) -> str:
        """Canonical name (the enum value)."""
        return self.algorithm.value


_ALIASES: dict[Algorithm, str] = {
    Algorithm.BAG: "bag",
    Algorithm.COSINE: "cos",
    Algorithm.DAMERAU_LEVENSHTEIN: "dlev",
    Algorithm.ENTROPY_NCD: "entncd",
    Algorithm.HAMMING: "ham",
    Algorithm.JACCARD: "jac",
    Algorithm.JARO: "jar",
    Algorithm.JARO_WINKLER: "jarw",
    Algorithm.LEVENSHTEIN: "lev",
    Algorithm.LONGEST_COMMON_SUBSEQUENCE: "lcsubseq",
    Algorithm.LONGEST_COMMON_SUBSTRING: "lcsubstr",
    Algorithm.LENGTH: "len",
    Algorithm.LIG3: "lig",
    Algorithm.MLIPNS: "mli",
    Algorithm.OVERLAP: "olap",
    Algorithm.PREFIX: "pre",
    Algorithm.RATCLIFF_OBERSHELP: "rat",
    Algorithm.ROBERTS: "rob",
    Algorithm.SIFT4_COMMON: "scom",
    Algorithm.SIFT4_SIMPLE: "ssim",
    Algorithm.SMITH_WATERMAN: "smithw",
    Algorithm.SORENSEN_DICE: "soredice",
    Algorithm.SUFFIX: "suf",
    Algorithm.TVERSKY: "tv",
    Algorithm.YUJIAN_BO: "ybo",
}

# Enum definition order is the catalog order.
CATALOG: tuple[CatalogEntry, ...] = tuple(
    CatalogEntry(algorithm=algorithm, alias=_ALIASES[algorithm])
    for algorithm in Algorithm
)

_BY_ALGORITHM: dict[Algorithm, CatalogEntry] = {e.algorithm: e for e in CATALOG}


def _check_unique(entries: tuple[CatalogEntry, ...]) -> None:
    """Fail at import time if any name or alias collides.

    A name may equal its *own* alias (``bag``); it may not equal any other
    entry's name or alias.
    """
    owners: dict[str, Algorithm] = {}
    for entry in entries:
        for label in {entry.name.lower(), entry.alias.lower()}:
            owner = owners.setdefault(label, entry.algorithm)
            if owner is not entry.algorithm:
                msg = (
                    f"catalog label {label!r} used by both "
                    f"{owner} and {entry.algorithm}"
                )
                raise RuntimeError(msg)


_check_unique(CATALOG)


def entry_for(algorithm: Algorithm) -> CatalogEntry:
    """Return the catalog row of ``algorithm``."""
    return _BY_ALGORITHM[algorithm]


def list_algorithms() -> list[tuple[str, str]]:
    """Return ``(canonical_name, alias)`` for every algorithm, in catalog order."""
    return [(entry.name, entry.alias) for entry in CATALOG]
