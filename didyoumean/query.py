# DidYouMean - Exact Query
# ========================
"""
Builds the exact-match condition for one or more fields.

Every field gets its own named parameter bound to the searched word, so
the word is never spliced into SQL text. Columns are compared in their
textual form, whatever their stored type:

    CAST("city" AS VARCHAR) = $word_0 OR CAST("country" AS VARCHAR) = $word_1
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from .errors import InvalidArgument

FieldSpec = Union[str, Sequence[str]]

PARAM_PREFIX = "word"


def to_text(value: Any) -> str:
    """Textual form of a field value; missing values become an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_fields(fields: FieldSpec) -> Tuple[str, ...]:
    """
    Turn a field spec into an ordered tuple of field names.

    Raises:
        InvalidArgument: if the spec is empty or holds anything but non-empty strings
    """
    if isinstance(fields, str):
        names = (fields,)
    else:
        try:
            names = tuple(fields)
        except TypeError:
            raise InvalidArgument("fields", f"expected a field name or a sequence of names, got {type(fields).__name__}")

    if not names:
        raise InvalidArgument("fields", "at least one field name is required")

    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("fields", f"field names must be non-empty strings, got {name!r}")

    return names


def quote_identifier(name: str) -> str:
    """Double-quote a column name for SQL."""
    return '"' + name.replace('"', '""') + '"'


@dataclass(frozen=True)
class ExactQuery:
    """OR-combination of ``field = word`` predicates with named parameters."""
    predicates: Tuple[Tuple[str, str], ...]   # (field, parameter name)
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.predicates)

    def to_sql(self) -> str:
        """Render the condition using DuckDB ``$name`` placeholders."""
        return " OR ".join(
            f"CAST({quote_identifier(name)} AS VARCHAR) = ${param}" for name, param in self.predicates
        )

    def matches(self, row: Mapping[str, Any]) -> bool:
        """Evaluate the condition against a plain row mapping."""
        return any(to_text(row.get(name)) == self.params[param] for name, param in self.predicates)

    def to_dict(self) -> Dict[str, object]:
        return {
            "fields": list(self.fields),
            "condition": self.to_sql(),
            "params": dict(self.params),
        }


def build_exact_query(fields: FieldSpec, word: str) -> ExactQuery:
    """
    Build the exact-match query for ``word`` over ``fields``.

    Parameters are named by field position (word_0, word_1, ...), which keeps
    them distinct even when the same field is listed twice.
    """
    names = normalize_fields(fields)

    predicates: List[Tuple[str, str]] = []
    params: Dict[str, str] = {}
    for i, name in enumerate(names):
        param = f"{PARAM_PREFIX}_{i}"
        predicates.append((name, param))
        params[param] = word

    return ExactQuery(predicates=tuple(predicates), params=params)
