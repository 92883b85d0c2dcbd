# DidYouMean - Suggestion Engine
# ==============================
"""
"Did you mean" lookups over a record store.

Resolution Flow:
1. Exact match on any of the requested fields -> return those records as-is
2. No exact match -> scan every record and collect field values within the
   edit-distance threshold of the searched word
3. Empty table or nothing close enough -> empty suggestion set

The two outcomes come back as different types (ExactMatches / Suggestions)
so callers never confuse records with suggested strings.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, Optional, Set, Tuple

from .config import Settings
from .distance import is_similar
from .errors import InvalidArgument
from .query import FieldSpec, build_exact_query
from .store import DuckDBRecordStore, Record, RecordStore, to_text
from .threshold import resolve_threshold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExactMatches:
    """Records whose field(s) equal the searched word."""
    records: Tuple[Record, ...]
    word: str = ""

    is_exact = True

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "exact",
            "word": self.word,
            "records": [record.to_dict() for record in self.records],
        }


@dataclass(frozen=True)
class Suggestions:
    """Unique existing values similar to the searched word (unordered)."""
    values: FrozenSet[str] = field(default_factory=frozenset)
    word: str = ""
    threshold: int = 0

    is_exact = False

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __bool__(self) -> bool:
        return bool(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "suggestions",
            "word": self.word,
            "threshold": self.threshold,
            "values": sorted(self.values),
        }


class SuggestionEngine:
    """
    Suggests existing values for a possibly misspelled word.

    Example:
        engine = SuggestionEngine(store)
        engine.suggest("city", "Rom")               # Suggestions({"Rome", "Roma"})
        engine.suggest(["city", "country"], "Rome")  # ExactMatches((Record(...),))
    """

    def __init__(self, store: RecordStore):
        self.store = store

    @classmethod
    def from_settings(cls, settings: Settings) -> "SuggestionEngine":
        """Build an engine over the DuckDB table named in ``settings``."""
        store = DuckDBRecordStore(
            db_path=settings.DB_PATH,
            table=settings.TABLE,
            read_only=settings.READ_ONLY,
            scan_limit=settings.SCAN_LIMIT,
        )
        return cls(store)

    def suggest(self, fields: FieldSpec, word: str, threshold: Optional[int] = None):
        """
        Look up ``word`` in ``fields``.

        Args:
            fields: A field name or an ordered sequence of field names
            word: The searched (possibly misspelled) value
            threshold: Maximum edit distance; derived from the word length if omitted

        Returns:
            ExactMatches if any record has ``word`` in one of the fields,
            otherwise Suggestions with the similar values found

        Raises:
            InvalidArgument: empty word or empty/malformed field spec
            StoreQueryError: whatever the store raises, unchanged
        """
        if not isinstance(word, str) or not word:
            raise InvalidArgument("word", "a non-empty string is required")

        query = build_exact_query(fields, word)
        limit = resolve_threshold(word, threshold)
        logger.debug(f"Suggest '{word}' in {list(query.fields)} (threshold {limit})")

        exact = self.store.find(query)
        if exact:
            logger.debug(f"Found {len(exact)} exact match(es) for '{word}'")
            return ExactMatches(records=tuple(exact), word=word)

        records = self.store.find_all()
        if not records:
            return Suggestions(word=word, threshold=limit)

        logger.info(f"No exact match for '{word}', scanning {len(records)} records")
        similar: Set[str] = set()
        for record in records:
            for name in query.fields:
                value = to_text(record.get_field(name))
                if is_similar(value, word, limit):
                    similar.add(value)

        logger.debug(f"Collected {len(similar)} suggestion(s) for '{word}'")
        return Suggestions(values=frozenset(similar), word=word, threshold=limit)


def suggest(store: RecordStore, fields: FieldSpec, word: str, threshold: Optional[int] = None):
    """Convenience wrapper: ``SuggestionEngine(store).suggest(...)``."""
    return SuggestionEngine(store).suggest(fields, word, threshold)
