"""
Fuzzy candidate index over emoji names.

rapidfuzz supplies the best-aligned substring for a pattern; the score is
then shaped the way bitap matchers do it: the fraction of edits needed plus
how far from the expected location the match starts.  Lower score = better.
"""
from __future__ import annotations

import logging
from typing import Sequence

from rapidfuzz import fuzz

from .types import FuzzyOptions

logger = logging.getLogger(__name__)


class FuzzyResult:
    __slots__ = ("item", "ref_index", "score")

    def __init__(self, item: str, ref_index: int, score: float) -> None:
        self.item = item
        self.ref_index = ref_index
        self.score = score

    def __repr__(self) -> str:
        return f"FuzzyResult({self.item!r}, ref_index={self.ref_index}, score={self.score:.3f})"


def fuzzy_score(pattern: str, text: str, options: FuzzyOptions) -> float | None:
    """
    Score *pattern* against *text*, or return None when it does not match.

    Patterns outside ``min_match_char_length..max_pattern_length`` never match.
    """
    if not options.case_sensitive:
        pattern = pattern.lower()
        text = text.lower()

    if len(pattern) < options.min_match_char_length or len(pattern) > options.max_pattern_length:
        return None
    if not text:
        return None

    cutoff = max(0.0, (1.0 - options.threshold) * 100.0)
    alignment = fuzz.partial_ratio_alignment(pattern, text, score_cutoff=cutoff)
    if alignment is None:
        return None
    if alignment.dest_end - alignment.dest_start < options.min_match_char_length:
        return None

    accuracy = 1.0 - alignment.score / 100.0
    if len(pattern) > len(text):
        # The alignment only covers part of the pattern; the rest are errors.
        matched = alignment.dest_end - alignment.dest_start
        accuracy = max(accuracy, (len(pattern) - matched) / len(pattern))
    offset = abs(alignment.dest_start - options.location)
    if options.distance:
        proximity = offset / options.distance
    else:
        proximity = 0.0 if offset == 0 else 1.0

    score = accuracy + proximity
    if score > options.threshold:
        return None
    return score


class CandidateIndex:
    """
    Searchable snapshot of a corpus.  Never patched: build a new one when the
    corpus changes.
    """

    def __init__(
        self,
        names: Sequence[str],
        options: FuzzyOptions | None = None,
        version: int = 0,
    ) -> None:
        self._names = tuple(names)
        self._options = options or FuzzyOptions()
        self.version = version
        logger.debug("Built candidate index (version=%d, size=%d)", version, len(self._names))

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    @property
    def options(self) -> FuzzyOptions:
        return self._options

    def __len__(self) -> int:
        return len(self._names)

    def search_results(self, term: str) -> list[FuzzyResult]:
        """Matching entries ordered by score, then corpus position."""
        if len(term) > self._options.max_pattern_length:
            logger.debug("Pattern of length %d exceeds max_pattern_length", len(term))
            return []

        results: list[FuzzyResult] = []
        for index, name in enumerate(self._names):
            score = fuzzy_score(term, name, self._options)
            if score is not None:
                results.append(FuzzyResult(name, index, score))

        results.sort(key=lambda r: (r.score, r.ref_index))
        return results

    def search_indices(self, term: str) -> list[int]:
        return [r.ref_index for r in self.search_results(term)]

    def search(self, term: str) -> list[str]:
        return [self._names[i] for i in self.search_indices(term)]
