"""
Option models for the emoji suggestion engine.
"""
from __future__ import annotations

import sys

from pydantic import BaseModel, Field


def _default_shadow_commit() -> bool:
    # iOS autocorrect rewrites ":name" unless the shorthand is typed with "::".
    return sys.platform == "ios"


# ─── Fuzzy matching ───────────────────────────────────────────────────────────

class FuzzyOptions(BaseModel):
    """Approximate-matching parameters for the candidate index."""
    threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    location: int = Field(default=0, ge=0)
    distance: int = Field(default=100, ge=0)
    min_match_char_length: int = Field(default=2, ge=1)
    max_pattern_length: int = Field(default=32, ge=1)
    case_sensitive: bool = False


# ─── Suggestion engine ────────────────────────────────────────────────────────

class EmojiSuggestionOptions(BaseModel):
    """Runtime options for one input session."""
    debounce_ms: int = Field(default=100, ge=0)
    is_search: bool = False
    custom_emojis_enabled: bool = False
    shadow_commit: bool = Field(default_factory=_default_shadow_commit)
    root_id: str | None = None
    max_visible: int = Field(default=10, ge=1)
    fuzzy: FuzzyOptions = Field(default_factory=FuzzyOptions)
