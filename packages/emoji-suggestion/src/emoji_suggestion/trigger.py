"""
Trigger detection for emoji shorthand tokens.

A token opens with ``:`` at the start of the text, after whitespace, or right
after a leading ``+``/``-`` reaction marker, and runs to the cursor without a
closing colon.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

# (boundary)(:(partial term)) anchored at the cursor.  \Z rather than $ so a
# token followed by a trailing newline is not treated as ending at the cursor.
EMOJI_PATTERN = re.compile(r"(^|\s|^\+|^-)(:([^:\s]*))\Z")

# Same open-colon token without the whitespace boundary; used when splicing.
# \B still refuses a colon glued to a preceding word character.
EMOJI_PATTERN_WITHOUT_PREFIX = re.compile(r"\B(:([^:\s]*))\Z")

REACTION_PREFIX = "+:"


@dataclass(frozen=True)
class TriggerMatch:
    full_prefix: str
    partial_term: str

    @property
    def start(self) -> int:
        """Index of the opening colon."""
        return len(self.full_prefix) - 1

    @property
    def just_opened(self) -> bool:
        return self.partial_term == ""

    @property
    def is_reaction(self) -> bool:
        return self.full_prefix == REACTION_PREFIX


def clamp_cursor(text: str, cursor: int | None) -> int:
    if cursor is None:
        return len(text)
    return max(0, min(cursor, len(text)))


def detect_trigger(text: str, cursor: int | None, is_search: bool = False) -> TriggerMatch | None:
    """
    Return the emoji token being typed at *cursor*, or None.

    Search-bar inputs never trigger.  A bare ``:`` is a valid match with an
    empty partial term.
    """
    if is_search or not text:
        return None

    text_before = text[:clamp_cursor(text, cursor)]
    match = EMOJI_PATTERN.search(text_before)
    if match is None:
        return None

    partial_term = match.group(3) or ""
    return TriggerMatch(
        full_prefix=text_before[:match.start(2) + 1],
        partial_term=partial_term,
    )
