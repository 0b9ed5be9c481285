"""
Deterministic ordering of emoji candidates.

With a search term: exact match, then prefix matches, then shorter names,
then alphabetical.  Without one: alphabetical, then shorter names.
Comparison is case-insensitive; the raw name breaks remaining ties so the
order never depends on the order candidates arrived in.
"""
from __future__ import annotations

from typing import Iterable


def _sort_key(name: str, term: str | None) -> tuple:
    lower = name.lower()
    if not term:
        return (lower, len(name), name)
    t = term.lower()
    return (lower != t, not lower.startswith(t), len(name), lower, name)


def compare_emojis(a: str, b: str, term: str | None = None) -> int:
    """cmp-style comparator: negative if *a* sorts first, 0 if equal."""
    ka = _sort_key(a, term)
    kb = _sort_key(b, term)
    return (ka > kb) - (ka < kb)


def rank(candidates: Iterable[str], term: str | None = None) -> list[str]:
    """Return the unique candidates in ranked order."""
    return sorted(set(candidates), key=lambda name: _sort_key(name, term))
