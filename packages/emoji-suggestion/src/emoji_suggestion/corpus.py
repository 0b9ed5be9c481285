"""
Generation-tagged handle over the emoji name corpus.

The host owns the names; consumers compare ``version`` to decide whether a
derived index is stale instead of relying on object identity.
"""
from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


def _clean_names(names: Iterable[object] | None) -> tuple[str, ...]:
    if names is None:
        return ()
    if isinstance(names, str):
        logger.warning("Emoji corpus given as a bare string; treating as empty")
        return ()

    cleaned: list[str] = []
    dropped = 0
    try:
        for name in names:
            if isinstance(name, str) and name:
                cleaned.append(name)
            else:
                dropped += 1
    except TypeError:
        logger.warning("Emoji corpus of type %s is not iterable; treating as empty", type(names).__name__)
        return ()

    if dropped:
        logger.warning("Dropped %d malformed emoji corpus entries", dropped)
    return tuple(cleaned)


class EmojiCorpus:
    """Ordered, read-only sequence of emoji names with a change counter."""

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._names = _clean_names(names)
        self._version = 0

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def version(self) -> int:
        return self._version

    def replace(self, names: Iterable[str] | None) -> None:
        """Swap in a new set of names and bump the version."""
        self._names = _clean_names(names)
        self._version += 1
        logger.debug("Emoji corpus replaced (version=%d, size=%d)", self._version, len(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]
