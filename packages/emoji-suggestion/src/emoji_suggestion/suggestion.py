"""
EmojiSuggestion — the trigger → search → rank → complete state machine.

Driven by host notifications (text changes, corpus updates, selections) and
by its own debounce timer, all on a single event loop.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .completion import AddReaction, CommitStrategy, CompletionEngine, CompletionResult, commit_strategy_for
from .corpus import EmojiCorpus
from .fuzzy import CandidateIndex
from .lookup import EmojiLookup
from .ranking import rank
from .scheduler import Debouncer, EventLoopScheduler, Scheduler
from .trigger import TriggerMatch, clamp_cursor, detect_trigger
from .types import EmojiSuggestionOptions

logger = logging.getLogger(__name__)


@dataclass
class SuggestionState:
    active: bool = False
    candidates: list[str] = field(default_factory=list)
    # None once reset, so re-entering the same token searches again.
    last_query_term: str | None = None
    # Set by a completion; the next text change resets instead of searching.
    completion_latched: bool = False


class EmojiSuggestion:
    """
    Inline emoji autocomplete for one text input.

    The host calls ``on_text_changed`` on every edit, ``set_corpus`` when the
    known emoji names change and ``complete`` when the user picks a
    candidate.  Results are read from ``active``/``candidates`` and announced
    through ``on_result_count_change``.
    """

    def __init__(
        self,
        corpus: EmojiCorpus | Iterable[str] | None = None,
        *,
        options: EmojiSuggestionOptions | None = None,
        scheduler: Scheduler | None = None,
        lookup: EmojiLookup | None = None,
        on_change_text: Callable[[str], None] | None = None,
        on_result_count_change: Callable[[int], None] | None = None,
        add_reaction_to_latest_post: AddReaction | None = None,
        autocomplete_custom_emojis: Callable[[str], None] | None = None,
        strategy: CommitStrategy | None = None,
    ) -> None:
        self.options = options or EmojiSuggestionOptions()
        self._scheduler = scheduler or EventLoopScheduler()
        self._corpus = corpus if isinstance(corpus, EmojiCorpus) else EmojiCorpus(corpus)
        self._index: CandidateIndex | None = None

        self.on_change_text = on_change_text
        self.on_result_count_change = on_result_count_change
        self.autocomplete_custom_emojis = autocomplete_custom_emojis
        self._add_reaction = add_reaction_to_latest_post

        self._engine = CompletionEngine(
            emit_text=self._emit_text,
            scheduler=self._scheduler,
            lookup=lookup,
            add_reaction=self._notify_reaction,
            strategy=strategy or commit_strategy_for(self.options.shadow_commit),
            root_id=self.options.root_id,
        )
        self._debouncer = Debouncer(self._scheduler, self.options.debounce_ms)

        self.state = SuggestionState()
        self._text = ""
        self._cursor = 0

        self._ensure_index()

    # ── Read-only views ──────────────────────────────────────────────────────

    @property
    def active(self) -> bool:
        return self.state.active

    @property
    def candidates(self) -> tuple[str, ...]:
        return tuple(self.state.candidates)

    @property
    def result_count(self) -> int:
        return len(self.state.candidates) if self.state.active else 0

    @property
    def corpus(self) -> EmojiCorpus:
        return self._corpus

    @property
    def index(self) -> CandidateIndex | None:
        return self._index

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def root_id(self) -> str | None:
        return self._engine.root_id

    @root_id.setter
    def root_id(self, value: str | None) -> None:
        self._engine.root_id = value

    # ── Host notifications ───────────────────────────────────────────────────

    def on_text_changed(self, text: str, cursor: int | None = None) -> None:
        """React to an edit or cursor move in the host input."""
        if self.options.is_search:
            return

        self._text = text or ""
        self._cursor = clamp_cursor(self._text, cursor)

        corpus_changed = self._ensure_index()
        trigger = detect_trigger(self._text, self._cursor)

        if trigger is None or self.state.completion_latched:
            self._reset_autocomplete()
            return

        old_term = self.state.last_query_term
        term = trigger.partial_term
        self.state.last_query_term = term

        if term != old_term or trigger.just_opened:
            if self.options.custom_emojis_enabled and self.autocomplete_custom_emojis is not None:
                self._safe_call("autocomplete_custom_emojis", self.autocomplete_custom_emojis, term)
            self._search_emoji(term)
        elif corpus_changed:
            self._search_emoji(term)

    def set_corpus(self, corpus: EmojiCorpus | Iterable[str] | None) -> None:
        """
        Install a new corpus.  A token that is still open is searched again
        against it, superseding any search still waiting on the old one.
        """
        if isinstance(corpus, EmojiCorpus):
            self._corpus = corpus
            self._index = None
        else:
            self._corpus.replace(corpus)

        self._ensure_index()

        trigger = self._current_trigger()
        if trigger is not None and self.state.last_query_term is not None:
            self.state.last_query_term = trigger.partial_term
            self._search_emoji(trigger.partial_term)

    def complete(self, name: str, text: str | None = None, cursor: int | None = None) -> CompletionResult:
        """
        Apply the chosen candidate.  Only meaningful while a candidate list
        is showing; the host's next text change is swallowed by the latch.
        """
        if text is not None:
            self._text = text
            self._cursor = clamp_cursor(text, cursor)

        self._debouncer.cancel()
        self.state.active = False
        self.state.candidates = []
        self.state.completion_latched = True

        return self._engine.complete(self._text, self._cursor, name)

    def reset(self) -> None:
        self._reset_autocomplete()

    def destroy(self) -> None:
        self._debouncer.cancel()
        self.on_change_text = None
        self.on_result_count_change = None
        self.autocomplete_custom_emojis = None
        self._add_reaction = None

    # ── Internals ────────────────────────────────────────────────────────────

    def _current_trigger(self) -> TriggerMatch | None:
        if self.options.is_search or self.state.completion_latched:
            return None
        return detect_trigger(self._text, self._cursor)

    def _ensure_index(self) -> bool:
        """Rebuild the index if the corpus moved on.  Returns True on rebuild."""
        version = self._corpus.version
        if self._index is not None and self._index.version == version:
            return False
        self._index = CandidateIndex(self._corpus.names, self.options.fuzzy, version=version)
        return True

    def _search_emoji(self, term: str) -> None:
        if term:
            self._handle_fuzzy_search(term)
        else:
            # Empty token lists everything immediately; an older pending
            # search must not overwrite it.
            self._debouncer.cancel()
            self._set_emoji_data(self._corpus.names, None)

    def _handle_fuzzy_search(self, term: str) -> None:
        def _run() -> None:
            self._ensure_index()
            index = self._index
            data = index.search(term.lower()) if index is not None else []
            logger.debug("Fuzzy search %r matched %d of %d", term, len(data), len(self._corpus))
            self._set_emoji_data(data, term)

        self._debouncer.schedule(_run)

    def _set_emoji_data(self, data: Iterable[str], term: str | None) -> None:
        ranked = rank(data, term)
        self.state.candidates = ranked
        self.state.active = len(ranked) > 0
        self._notify_count(len(ranked))

    def _reset_autocomplete(self) -> None:
        self._debouncer.cancel()
        self.state.active = False
        self.state.candidates = []
        self.state.completion_latched = False
        self.state.last_query_term = None
        self._notify_count(0)

    def _emit_text(self, text: str) -> None:
        if self.on_change_text is not None:
            self.on_change_text(text)

    def _notify_count(self, count: int) -> None:
        if self.on_result_count_change is not None:
            self._safe_call("on_result_count_change", self.on_result_count_change, count)

    def _notify_reaction(self, name: str, root_id: str | None) -> None:
        if self._add_reaction is None:
            logger.warning("Reaction shortcut used for %r but no reaction handler is configured", name)
            return
        self._safe_call("add_reaction_to_latest_post", self._add_reaction, name, root_id)

    def _safe_call(self, label: str, fn: Callable[..., Any], *args: Any) -> None:
        try:
            fn(*args)
        except Exception:
            logger.exception("Host callback %s raised", label)
