# Pytest configuration for suggestion tests
"""
Fixtures shared by the suggestion engine tests.
"""

import os
import sys
import tempfile
import pytest
import pandas as pd
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from didyoumean import InMemoryRecordStore, DuckDBRecordStore


PEOPLE = [
    {"name": "Antonio", "city": "Rome", "country": "Italy"},
    {"name": "Giulia", "city": "Roma", "country": "Italy"},
    {"name": "Marco", "city": "Milan", "country": "Italy"},
    {"name": "Ana", "city": "Bucharest", "country": "Romania"},
    {"name": "Ion", "city": "Cluj", "country": "Romania"},
    {"name": "Claire", "city": "Paris", "country": "France"},
]


@pytest.fixture
def people_rows():
    """Rows describing people and where they live."""
    return [dict(row) for row in PEOPLE]


@pytest.fixture
def memory_store(people_rows):
    """In-memory store seeded with the people rows."""
    return InMemoryRecordStore(people_rows, name="people")


@pytest.fixture
def people_df():
    """The people rows as a DataFrame."""
    return pd.DataFrame(PEOPLE)


@pytest.fixture
def duckdb_path():
    """Path to a DuckDB file inside a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield os.path.join(tmpdir, "people.duckdb")


@pytest.fixture
def duckdb_store(duckdb_path, people_df):
    """DuckDB store with the people table loaded."""
    store = DuckDBRecordStore(duckdb_path, table="people")
    store.load_dataframe(people_df)
    yield store
    store.close()
