# DidYouMean - Record Stores
# ==========================
"""
Record stores the suggestion engine reads from.

A store answers two questions: which records have a field equal to the
searched word (``find``), and what does the whole table hold
(``find_all``). Two stores ship with the package:

- InMemoryRecordStore: plain list of dicts, handy for tests and small lookups
- DuckDBRecordStore: a single DuckDB table, queried with bound parameters
"""

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Sequence

import duckdb
import pandas as pd

from .errors import StoreQueryError
from .query import ExactQuery, quote_identifier, to_text

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class Record(Mapping[str, Any]):
    """
    Read-only row returned by a record store.

    Fields are read by name with ``get_field`` or item access.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]):
        self._fields = dict(fields)

    def get_field(self, name: str) -> Any:
        """Return the raw value of ``name``; KeyError if the record has no such field."""
        return self._fields[name]

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._fields == other._fields
        return NotImplemented

    def __hash__(self):
        return hash(tuple(sorted((k, to_text(v)) for k, v in self._fields.items())))

    def __repr__(self) -> str:
        return f"Record({self._fields!r})"

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._fields)


class RecordStore(Protocol):
    """What the suggestion engine needs from a table."""

    def find(self, query: ExactQuery) -> Sequence[Record]:
        """Records satisfying the exact-match query, in store order."""
        ...

    def find_all(self) -> Sequence[Record]:
        """Every record in the table."""
        ...


class InMemoryRecordStore:
    """
    Record store over a list of row dicts.

    Example:
        store = InMemoryRecordStore([{"city": "Rome"}, {"city": "Milan"}])
        store.find(build_exact_query("city", "Rome"))
    """

    def __init__(self,
                 rows: Iterable[Mapping[str, Any]] = (),
                 name: str = "memory",
                 columns: Optional[Sequence[str]] = None):
        self.name = name
        self._declared = list(columns or [])
        self._records: List[Record] = [Record(row) for row in rows]

    @property
    def columns(self) -> List[str]:
        seen: Dict[str, None] = dict.fromkeys(self._declared)
        for record in self._records:
            for key in record:
                seen.setdefault(key, None)
        return list(seen)

    def add(self, row: Mapping[str, Any]) -> Record:
        record = Record(row)
        self._records.append(record)
        return record

    def find(self, query: ExactQuery) -> List[Record]:
        known = set(self.columns)
        unknown = [name for name in query.fields if name not in known]
        # An empty store without declared columns has no schema to check against
        if unknown and known:
            raise StoreQueryError(self.name, f"unknown field(s): {', '.join(unknown)}")

        return [record for record in self._records if query.matches(record)]

    def find_all(self) -> List[Record]:
        # Rows missing a column read as None, like a NULL in a table
        columns = self.columns
        return [
            record if len(record) == len(columns) else Record({c: record.get(c) for c in columns})
            for record in self._records
        ]

    def __len__(self) -> int:
        return len(self._records)


class DuckDBRecordStore:
    """
    Record store backed by a single DuckDB table.

    Exact lookups run as ``SELECT * ... WHERE CAST("f" AS VARCHAR) = $word_0 OR ...`` with the
    word passed as a bound parameter. The fallback scan can be capped with
    ``scan_limit`` to bound its cost on large tables.

    Example:
        with DuckDBRecordStore("data/people.duckdb", "people") as store:
            store.load_dataframe(df)
            records = store.find(build_exact_query("city", "Rome"))
    """

    def __init__(self,
                 db_path: str = MEMORY_DB,
                 table: str = "records",
                 read_only: bool = False,
                 scan_limit: Optional[int] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to a DuckDB file, or ":memory:"
            table: Table holding the records
            read_only: Open the database read-only (the file must exist)
            scan_limit: Maximum rows returned by find_all (None for no cap)
        """
        self.db_path = db_path
        self.table = table
        self.read_only = read_only
        self.scan_limit = scan_limit
        self._conn: Optional[duckdb.DuckDBPyConnection] = None
        self._conn_lock = threading.Lock()

        if db_path != MEMORY_DB:
            path = Path(db_path)
            if read_only and not path.exists():
                raise FileNotFoundError(f"Database not found: {db_path}")
            path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        with self._conn_lock:
            if self._conn is None:
                self._conn = duckdb.connect(str(self.db_path), read_only=self.read_only)
                logger.info(f"Connected to DuckDB: {self.db_path} (table {self.table})")
            return self._conn

    def _fetch(self, sql: str, params: Optional[Dict[str, Any]] = None) -> List[Record]:
        conn = self._get_connection()
        try:
            cursor = conn.execute(sql, params) if params else conn.execute(sql)
            columns = [desc[0] for desc in cursor.description]
            rows = cursor.fetchall()
        except duckdb.Error as e:
            logger.error(f"Query on {self.table} failed: {e}")
            raise StoreQueryError(self.table, str(e), sql=sql) from e

        return [Record(dict(zip(columns, row))) for row in rows]

    def find(self, query: ExactQuery) -> List[Record]:
        sql = f"SELECT * FROM {quote_identifier(self.table)} WHERE {query.to_sql()}"
        return self._fetch(sql, query.params)

    def find_all(self) -> List[Record]:
        sql = f"SELECT * FROM {quote_identifier(self.table)}"
        if self.scan_limit is not None:
            sql += f" LIMIT {int(self.scan_limit)}"
        return self._fetch(sql)

    def load_dataframe(self, df: pd.DataFrame, if_exists: str = "replace") -> int:
        """
        Load a DataFrame into the store's table.

        Args:
            df: Rows to load
            if_exists: 'replace', 'append', or 'fail'

        Returns:
            Number of rows loaded
        """
        if if_exists not in ("replace", "append", "fail"):
            raise ValueError(f"if_exists must be 'replace', 'append' or 'fail', got {if_exists!r}")

        conn = self._get_connection()
        table = quote_identifier(self.table)
        exists = self.table in self.list_tables()

        if exists and if_exists == "fail":
            raise StoreQueryError(self.table, "table already exists")

        conn.register("_incoming_df", df)
        try:
            if exists and if_exists == "append":
                conn.execute(f"INSERT INTO {table} SELECT * FROM _incoming_df")
            else:
                conn.execute(f"CREATE OR REPLACE TABLE {table} AS SELECT * FROM _incoming_df")
        except duckdb.Error as e:
            raise StoreQueryError(self.table, str(e)) from e
        finally:
            conn.unregister("_incoming_df")

        logger.info(f"Loaded {len(df)} rows into {self.table}")
        return len(df)

    def list_tables(self) -> List[str]:
        conn = self._get_connection()
        return [row[0] for row in conn.execute("SHOW TABLES").fetchall()]

    def close(self):
        """Close database connection."""
        with self._conn_lock:
            if self._conn:
                self._conn.close()
                self._conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
