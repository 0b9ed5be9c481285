"""Tests for emoji_suggestion.presentation"""
from emoji_suggestion.presentation import EmojiSuggestionList, format_label
from emoji_suggestion.suggestion import EmojiSuggestion
from emoji_suggestion.types import EmojiSuggestionOptions


def _make(scheduler, names, **opts):
    texts = []
    suggestion = EmojiSuggestion(
        names,
        options=EmojiSuggestionOptions(shadow_commit=False, **opts),
        scheduler=scheduler,
        on_change_text=texts.append,
    )
    return suggestion, texts


class TestEmojiSuggestionList:
    def test_inactive_has_no_rows(self, scheduler, corpus_names):
        suggestion, _ = _make(scheduler, corpus_names)
        view = EmojiSuggestionList(suggestion)
        assert not view.active
        assert view.rows() == []
        assert view.result_count == 0

    def test_rows_are_labelled_as_shorthand(self, scheduler, corpus_names):
        suggestion, _ = _make(scheduler, corpus_names)
        view = EmojiSuggestionList(suggestion)
        suggestion.on_text_changed(":", 1)
        rows = view.rows()
        assert len(rows) == len(corpus_names)
        assert rows[0].label == format_label(rows[0].name) == f":{rows[0].name}:"
        assert rows[0].key == rows[0].name

    def test_visible_rows_bounded(self, scheduler, corpus_names):
        suggestion, _ = _make(scheduler, corpus_names, max_visible=3)
        view = EmojiSuggestionList(suggestion)
        suggestion.on_text_changed(":", 1)
        assert len(view.visible_rows()) == 3
        assert view.result_count == len(corpus_names)

    def test_explicit_max_visible_overrides_options(self, scheduler, corpus_names):
        suggestion, _ = _make(scheduler, corpus_names)
        view = EmojiSuggestionList(suggestion, max_visible=2)
        suggestion.on_text_changed(":", 1)
        assert len(view.visible_rows()) == 2

    def test_choose_completes_selected_row(self, scheduler, corpus_names):
        suggestion, texts = _make(scheduler, corpus_names)
        view = EmojiSuggestionList(suggestion)
        suggestion.on_text_changed("hey :roc", 8)
        scheduler.advance(0.1)
        result = view.choose(0)
        assert result is not None
        assert texts == ["hey :rocket: "]
        assert view.rows() == []

    def test_choose_out_of_range(self, scheduler, corpus_names):
        suggestion, texts = _make(scheduler, corpus_names)
        view = EmojiSuggestionList(suggestion)
        suggestion.on_text_changed(":", 1)
        assert view.choose(99) is None
        assert view.choose(-1) is None
        assert texts == []
