"""
Completion — splice a chosen emoji back into the input text.

Three outcomes:
- ``+:`` reaction shortcut: add a reaction and clear the input
- custom emoji stored under a codepoint filename: insert the literal character
- everything else: insert ``:name: `` shorthand, via a commit strategy
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from .lookup import EmojiLookup
from .scheduler import Scheduler
from .trigger import EMOJI_PATTERN_WITHOUT_PREFIX, REACTION_PREFIX, clamp_cursor

logger = logging.getLogger(__name__)

EmitText = Callable[[str], None]
AddReaction = Callable[[str, str | None], None]


# ─────────────────────────────────────────────────────────────────────────────
# Pure completion
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class CompletionResult:
    emoji_name: str
    text: str
    cursor: int
    is_reaction: bool = False
    is_codepoint: bool = False
    # Text to install once a shadow commit has settled; None when not needed.
    cleanup_text: str | None = None
    cleanup_cursor: int | None = None


def decode_codepoints(filename: str) -> str:
    """``"1f468-200d-1f4bb"`` → the characters those hex codepoints name."""
    parts = filename.split("-")
    if not filename or not all(parts):
        raise ValueError(f"Malformed codepoint filename: {filename!r}")
    return "".join(chr(int(part, 16)) for part in parts)


def _codepoint_replacement(name: str, lookup: EmojiLookup | None) -> str | None:
    if lookup is None:
        return None
    emoji = lookup.get_emoji_by_name(name)
    if emoji is None or not emoji.filename or lookup.is_built_in(emoji.filename):
        return None
    try:
        return decode_codepoints(emoji.filename)
    except (ValueError, OverflowError):
        logger.warning("Emoji %r has undecodable filename %r; inserting shorthand", name, emoji.filename)
        return None


def build_completion(
    text: str,
    cursor: int,
    name: str,
    lookup: EmojiLookup | None = None,
    prefix: str = ":",
) -> CompletionResult:
    """
    Compute the text that results from choosing *name* at *cursor*.

    Pure: the same inputs always give the same result.
    """
    cursor = clamp_cursor(text, cursor)
    emoji_part = text[:cursor]
    after_cursor = text[cursor:]

    if emoji_part.startswith(REACTION_PREFIX):
        return CompletionResult(emoji_name=name, text="", cursor=0, is_reaction=True)

    code = _codepoint_replacement(name, lookup)
    if code is not None:
        replacement = f"{code} "
    else:
        replacement = f"{prefix}{name}: "

    completed, count = EMOJI_PATTERN_WITHOUT_PREFIX.subn(lambda _m: replacement, emoji_part, count=1)
    if not count:
        logger.debug("No open emoji token before cursor %d; text left unchanged", cursor)

    result = CompletionResult(
        emoji_name=name,
        text=completed + after_cursor,
        cursor=len(completed),
        is_codepoint=code is not None,
    )

    if code is None and count and prefix != ":":
        simplified = f":{name}: "
        cleaned = completed.replace(replacement, simplified, 1)
        result.cleanup_text = cleaned + after_cursor
        result.cleanup_cursor = len(cleaned)
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Commit strategies
# ─────────────────────────────────────────────────────────────────────────────

@runtime_checkable
class CommitStrategy(Protocol):
    prefix: str

    def commit(self, result: CompletionResult, emit: EmitText, scheduler: Scheduler) -> None: ...


class DirectCommit:
    """Install the completed text once."""

    prefix = ":"

    def commit(self, result: CompletionResult, emit: EmitText, scheduler: Scheduler) -> None:
        emit(result.text)


class ShadowCommit:
    """
    Install ``::name: `` first, then collapse it to ``:name: `` on the next
    loop turn, after the platform's autocorrect popup has gone away.
    """

    prefix = "::"

    def commit(self, result: CompletionResult, emit: EmitText, scheduler: Scheduler) -> None:
        emit(result.text)
        cleanup = result.cleanup_text
        if cleanup is not None:
            scheduler.call_soon(lambda: emit(cleanup))


def commit_strategy_for(shadow_commit: bool) -> CommitStrategy:
    return ShadowCommit() if shadow_commit else DirectCommit()


# ─────────────────────────────────────────────────────────────────────────────
# CompletionEngine
# ─────────────────────────────────────────────────────────────────────────────

class CompletionEngine:
    """Applies a completion: side effects plus text emission."""

    def __init__(
        self,
        emit_text: EmitText,
        scheduler: Scheduler,
        lookup: EmojiLookup | None = None,
        add_reaction: AddReaction | None = None,
        strategy: CommitStrategy | None = None,
        root_id: str | None = None,
    ) -> None:
        self._emit_text = emit_text
        self._scheduler = scheduler
        self.lookup = lookup
        self._add_reaction = add_reaction
        self.strategy = strategy or DirectCommit()
        self.root_id = root_id

    def complete(self, text: str, cursor: int, name: str) -> CompletionResult:
        result = build_completion(text, cursor, name, self.lookup, self.strategy.prefix)

        if result.is_reaction:
            if self._add_reaction is not None:
                self._add_reaction(name, self.root_id)
            else:
                logger.warning("Reaction shortcut used for %r but no reaction handler is configured", name)
            self._emit_text(result.text)
        elif result.is_codepoint:
            self._emit_text(result.text)
        else:
            self.strategy.commit(result, self._emit_text, self._scheduler)

        logger.debug("Completed emoji %r (reaction=%s, codepoint=%s)", name, result.is_reaction, result.is_codepoint)
        return result
