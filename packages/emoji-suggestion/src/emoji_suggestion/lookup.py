"""
Emoji lookup tables — name → stored asset, and which assets are built in.
"""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class EmojiData(BaseModel):
    name: str
    filename: str | None = None
    aliases: list[str] = Field(default_factory=list)


@runtime_checkable
class EmojiLookup(Protocol):
    def get_emoji_by_name(self, name: str) -> EmojiData | None: ...

    def is_built_in(self, filename: str) -> bool: ...


class MappingEmojiLookup:
    """
    In-memory lookup.  Names and aliases resolve case-insensitively; the
    first emoji to claim a name wins.
    """

    def __init__(
        self,
        emojis: Iterable[EmojiData | dict] = (),
        built_in_filenames: Iterable[str] = (),
    ) -> None:
        self._by_name: dict[str, EmojiData] = {}
        self._built_in = frozenset(built_in_filenames)
        for emoji in emojis:
            self.add(emoji if isinstance(emoji, EmojiData) else EmojiData.model_validate(emoji))

    def add(self, emoji: EmojiData) -> None:
        for key in (emoji.name, *emoji.aliases):
            self._by_name.setdefault(key.lower(), emoji)

    def get_emoji_by_name(self, name: str) -> EmojiData | None:
        return self._by_name.get(name.lower())

    def is_built_in(self, filename: str) -> bool:
        return filename in self._built_in

    def __len__(self) -> int:
        return len({id(e) for e in self._by_name.values()})
