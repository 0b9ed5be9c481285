"""Tests for emoji_suggestion.trigger"""
import pytest

from emoji_suggestion.trigger import detect_trigger


class TestDetectTrigger:
    def test_colon_at_start(self):
        match = detect_trigger(":smi", 4)
        assert match is not None
        assert match.partial_term == "smi"
        assert match.full_prefix == ":"
        assert match.start == 0

    def test_colon_after_whitespace(self):
        match = detect_trigger("hello :sm", 9)
        assert match is not None
        assert match.partial_term == "sm"
        assert match.full_prefix == "hello :"

    def test_bare_colon_is_a_match(self):
        match = detect_trigger("hi :", 4)
        assert match is not None
        assert match.partial_term == ""
        assert match.just_opened is True

    def test_colon_inside_word_does_not_trigger(self):
        assert detect_trigger("hello:sm", 8) is None

    def test_closed_shorthand_does_not_trigger(self):
        assert detect_trigger("hello :smile:", 13) is None
        assert detect_trigger("hello :smile: ", 14) is None

    def test_whitespace_in_token_ends_it(self):
        assert detect_trigger(":sm ile", 7) is None

    def test_reaction_prefixes(self):
        plus = detect_trigger("+:th", 4)
        minus = detect_trigger("-:th", 4)
        assert plus is not None and plus.is_reaction
        assert minus is not None and not minus.is_reaction
        assert minus.partial_term == "th"

    def test_marker_only_counts_at_start(self):
        assert detect_trigger("a+:th", 5) is None

    def test_only_text_before_cursor_is_considered(self):
        match = detect_trigger("say :sm and more", 7)
        assert match is not None
        assert match.partial_term == "sm"
        assert detect_trigger("say :sm and more", 16) is None

    def test_trailing_newline_is_not_end_of_token(self):
        assert detect_trigger("hi :sm\n", 7) is None

    def test_token_after_newline(self):
        match = detect_trigger("line one\n:ro", 12)
        assert match is not None
        assert match.partial_term == "ro"

    def test_search_mode_never_triggers(self):
        assert detect_trigger(":smi", 4, is_search=True) is None

    @pytest.mark.parametrize("cursor", [-5, 100, None])
    def test_cursor_is_clamped(self, cursor):
        match = detect_trigger(":ok", cursor)
        if cursor == -5:
            assert match is None
        else:
            assert match is not None and match.partial_term == "ok"

    def test_empty_text(self):
        assert detect_trigger("", 0) is None
