"""
emoji_suggestion — inline ``:shorthand`` emoji autocomplete for text inputs.

Detects an emoji token as the user types, fuzzy-searches the known emoji
names, ranks the matches and splices the chosen one back into the text.
"""
from .completion import (
    CommitStrategy,
    CompletionEngine,
    CompletionResult,
    DirectCommit,
    ShadowCommit,
    build_completion,
    commit_strategy_for,
    decode_codepoints,
)
from .config import OptionsLoader, load_options
from .corpus import EmojiCorpus
from .fuzzy import CandidateIndex, FuzzyResult, fuzzy_score
from .lookup import EmojiData, EmojiLookup, MappingEmojiLookup
from .presentation import EmojiRow, EmojiSuggestionList, format_label
from .ranking import compare_emojis, rank
from .scheduler import Debouncer, EventLoopScheduler, Scheduler, TimerHandle
from .suggestion import EmojiSuggestion, SuggestionState
from .trigger import EMOJI_PATTERN, EMOJI_PATTERN_WITHOUT_PREFIX, TriggerMatch, detect_trigger
from .types import EmojiSuggestionOptions, FuzzyOptions

__all__ = [
    # completion
    "CommitStrategy",
    "CompletionEngine",
    "CompletionResult",
    "DirectCommit",
    "ShadowCommit",
    "build_completion",
    "commit_strategy_for",
    "decode_codepoints",
    # config
    "OptionsLoader",
    "load_options",
    # corpus
    "EmojiCorpus",
    # fuzzy
    "CandidateIndex",
    "FuzzyResult",
    "fuzzy_score",
    # lookup
    "EmojiData",
    "EmojiLookup",
    "MappingEmojiLookup",
    # presentation
    "EmojiRow",
    "EmojiSuggestionList",
    "format_label",
    # ranking
    "compare_emojis",
    "rank",
    # scheduler
    "Debouncer",
    "EventLoopScheduler",
    "Scheduler",
    "TimerHandle",
    # suggestion
    "EmojiSuggestion",
    "SuggestionState",
    # trigger
    "EMOJI_PATTERN",
    "EMOJI_PATTERN_WITHOUT_PREFIX",
    "TriggerMatch",
    "detect_trigger",
    # types
    "EmojiSuggestionOptions",
    "FuzzyOptions",
]
