"""
Presentation adapter — what a host list widget needs to show suggestions.
"""
from __future__ import annotations

from dataclasses import dataclass

from .completion import CompletionResult
from .suggestion import EmojiSuggestion


@dataclass(frozen=True)
class EmojiRow:
    key: str
    name: str
    label: str


def format_label(name: str) -> str:
    return f":{name}:"


class EmojiSuggestionList:
    """Row view over an ``EmojiSuggestion``; empty whenever it is inactive."""

    def __init__(self, suggestion: EmojiSuggestion, max_visible: int | None = None) -> None:
        self._suggestion = suggestion
        self._max_visible = max_visible or suggestion.options.max_visible

    @property
    def active(self) -> bool:
        return self._suggestion.active and self._suggestion.result_count > 0

    @property
    def result_count(self) -> int:
        return self._suggestion.result_count

    @property
    def max_visible(self) -> int:
        return self._max_visible

    @staticmethod
    def key_for(name: str) -> str:
        return name

    def rows(self) -> list[EmojiRow]:
        if not self.active:
            return []
        return [EmojiRow(key=self.key_for(n), name=n, label=format_label(n)) for n in self._suggestion.candidates]

    def visible_rows(self) -> list[EmojiRow]:
        return self.rows()[: self._max_visible]

    def choose(self, index: int) -> CompletionResult | None:
        """Complete with the row at *index*; None if there is no such row."""
        rows = self.rows()
        if not 0 <= index < len(rows):
            return None
        return self._suggestion.complete(rows[index].name)
