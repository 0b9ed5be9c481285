"""
Loading ``EmojiSuggestionOptions`` from a JSON settings file.

Keys may be camelCase (as written by the host app) or snake_case.  A missing
or unreadable file yields defaults; invalid values raise
``pydantic.ValidationError``.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any

from .types import EmojiSuggestionOptions

logger = logging.getLogger(__name__)

_KEY_MAP = {
    "debounceMs": "debounce_ms",
    "isSearch": "is_search",
    "customEmojisEnabled": "custom_emojis_enabled",
    "shadowCommit": "shadow_commit",
    "rootId": "root_id",
    "maxVisible": "max_visible",
    "minMatchCharLength": "min_match_char_length",
    "maxPatternLength": "max_pattern_length",
    "caseSensitive": "case_sensitive",
}

SETTINGS_SECTION = "emojiSuggestion"


def _map_keys(raw: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in raw.items():
        py_key = _KEY_MAP.get(key, key)
        result[py_key] = _map_keys(value) if isinstance(value, dict) else value
    return result


def merge_options(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """One-level deep merge; ``None`` in *override* leaves the base value."""
    result = dict(base)
    for key, val in override.items():
        if val is None:
            continue
        base_val = result.get(key)
        if isinstance(val, dict) and isinstance(base_val, dict):
            result[key] = {**base_val, **val}
        else:
            result[key] = val
    return result


class OptionsLoader:
    """Reads options from disk, remembering read errors instead of raising."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self._errors: list[dict[str, Any]] = []

    def _load_file(self, path: str) -> dict[str, Any]:
        if not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read emoji suggestion settings from %s: %s", path, e)
            self._errors.append({"path": path, "error": str(e)})
            return {}
        if not isinstance(raw, dict):
            return {}
        # Accept either a dedicated file or an app-wide one with a section.
        section = raw.get(SETTINGS_SECTION)
        if isinstance(section, dict):
            raw = section
        return _map_keys(raw)

    def load(self, overrides: dict[str, Any] | None = None) -> EmojiSuggestionOptions:
        data = self._load_file(self.path) if self.path else {}
        if overrides:
            data = merge_options(data, _map_keys(overrides))
        return EmojiSuggestionOptions.model_validate(data)

    def drain_errors(self) -> list[dict[str, Any]]:
        drained = list(self._errors)
        self._errors = []
        return drained


def load_options(path: str | None = None, overrides: dict[str, Any] | None = None) -> EmojiSuggestionOptions:
    return OptionsLoader(path).load(overrides)
