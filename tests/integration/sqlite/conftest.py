import sqlite3

import pytest
from stmtbuilder import Dialect, StmtBuilder


@pytest.fixture
def sqlite_conn():
    """Create an in-memory SQLite database for testing"""
    conn = sqlite3.connect(':memory:')
    conn.execute("""
    CREATE TABLE test_table (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        value INTEGER NOT NULL,
        note TEXT
    )
    """)
    conn.execute("""
    INSERT INTO test_table (name, value) VALUES
    ('Alice', 10),
    ('Bob', 20),
    ('Charlie', 30)
    """)
    conn.commit()

    yield conn
    conn.close()


@pytest.fixture
def table_builder():
    """Builder for the SQLite test table"""
    return StmtBuilder('test_table', Dialect.SQLITE)
