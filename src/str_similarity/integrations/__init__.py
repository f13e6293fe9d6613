"""Integrations subpackage for str-similarity.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_strings_similar`` fixture.

The plugin module imports pytest and is therefore not imported here; pytest
loads it through the entry point.
"""

from __future__ import annotations

__all__: list[str] = []
