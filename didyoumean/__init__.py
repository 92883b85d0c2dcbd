# DidYouMean
# ==========
"""
"Did you mean" suggestions for tabular data.

Given a word and one or more columns, returns the records holding that
exact value or, when there are none, the existing values within a few
edits of it.

Components:
- SuggestionEngine: exact lookup first, edit-distance scan as fallback
- RecordStore: InMemoryRecordStore and DuckDBRecordStore backends
- resolve_threshold: length-based edit tolerance
- build_exact_query: parameterised multi-field OR condition
- distance / is_similar: RapidFuzz Levenshtein helpers
"""

from .errors import (
    DidYouMeanError,
    InvalidArgument,
    StoreQueryError,
)

from .distance import (
    distance,
    is_similar,
)

from .threshold import resolve_threshold

from .query import (
    ExactQuery,
    build_exact_query,
    normalize_fields,
)

from .store import (
    Record,
    RecordStore,
    InMemoryRecordStore,
    DuckDBRecordStore,
    to_text,
)

from .engine import (
    SuggestionEngine,
    ExactMatches,
    Suggestions,
    suggest,
)

from .config import (
    Settings,
    load_settings,
    configure_logging,
)


__all__ = [
    # Errors
    "DidYouMeanError",
    "InvalidArgument",
    "StoreQueryError",

    # Distance
    "distance",
    "is_similar",

    # Threshold / Query
    "resolve_threshold",
    "ExactQuery",
    "build_exact_query",
    "normalize_fields",

    # Stores
    "Record",
    "RecordStore",
    "InMemoryRecordStore",
    "DuckDBRecordStore",
    "to_text",

    # Engine
    "SuggestionEngine",
    "ExactMatches",
    "Suggestions",
    "suggest",

    # Config
    "Settings",
    "load_settings",
    "configure_logging",
]
