"""Resolve a user-supplied algorithm identifier to an ``Algorithm``.

Identifiers are matched case-insensitively and exactly against canonical
names and aliases; there is no prefix or fuzzy matching.

``resolve`` never fails: an unknown identifier falls back to
``Algorithm.LEVENSHTEIN`` and a warning is logged so the substitution is
visible without changing the result.  ``resolve_strict`` is the opt-in
alternative that raises ``UnknownAlgorithmError`` instead.
"""

from __future__ import annotations

import logging

from str_similarity.catalog import CATALOG, Algorithm

__all__ = [
    "DEFAULT_ALGORITHM",
    "UnknownAlgorithmError",
    "resolve",
    "resolve_strict",
]

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.LEVENSHTEIN

_LOOKUP: dict[str, Algorithm] = {
    label.lower(): entry.algorithm
    for entry in CATALOG
    for label in (entry.name, entry.alias)
}


class UnknownAlgorithmError(ValueError):
    """Raised by ``resolve_strict`` for an identifier not in the catalog."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        valid = ", ".join(sorted(_LOOKUP))
        super().__init__(f"Unknown algorithm: {identifier!r}. Valid options: {valid}")


def resolve_strict(identifier: str) -> Algorithm:
    """Return the algorithm named by ``identifier`` or raise.

    Raises:
        UnknownAlgorithmError: If no canonical name or alias matches.
    """
    try:
        return _LOOKUP[identifier.lower()]
    except KeyError:
        raise UnknownAlgorithmError(identifier) from None


def resolve(identifier: str) -> Algorithm:
    """Return the algorithm named by ``identifier``, defaulting to Levenshtein.

    Args:
        identifier: Canonical name or alias, any letter case.

    Returns:
        The matching ``Algorithm``, or ``DEFAULT_ALGORITHM`` when nothing
        matches.
    """
    algorithm = _LOOKUP.get(identifier.lower())
    if algorithm is None:
        logger.warning(
            "Unknown algorithm %r, falling back to %s", identifier, DEFAULT_ALGORITHM
        )
        return DEFAULT_ALGORITHM
    return algorithm
