"""
Dialect-aware SQL statement builder for MySQL, PostgreSQL and SQLite.

Statements can be built either through a builder:
- sb = StmtBuilder('my_tbl', 'postgresql'); sb.build_insert_stmt(cols)

or with the one-shot module functions:
- stmtbuilder.insert('my_tbl', 'postgresql', cols)

The module functions are facades over StmtBuilder.
"""
__version__ = '0.1.0'

from typing import Any

from stmtbuilder.builder import StmtBuilder
from stmtbuilder.dialect import Dialect, get_available_dialects
from stmtbuilder.dialect import is_supported_dialect
from stmtbuilder.exceptions import StmtBuilderError, ValidationError
from stmtbuilder.options import BuilderOptions
from stmtbuilder.sql import quote_identifier
from stmtbuilder.types import KV, PLACEHOLDER, Pairs
from stmtbuilder.utils import get_dialect_name

from libb import load_options


def create_builder(options: BuilderOptions | dict[str, Any] | str,
                   config: Any | None = None, **kw: Any) -> StmtBuilder:
    """Create a statement builder from options.

    Args:
        options: Can be:
                - BuilderOptions object
                - String path to configuration
                - Dictionary of options
                - Options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options loaded from
              a dict or configuration; ignored for a BuilderOptions object

    Returns
        StmtBuilder for the configured table and dialect
    """
    if not isinstance(options, BuilderOptions):
        options_func = load_options(cls=BuilderOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)

    return StmtBuilder(options.table, options.drivername)


def insert(table: str, dialect: Dialect | str, cols: Pairs) -> str:
    """Build an INSERT statement for `table`.
    """
    return StmtBuilder(table, dialect).build_insert_stmt(cols)


def select(table: str, dialect: Dialect | str, cols: list[str] | None = None,
           conds: Pairs = None) -> str:
    """Build a SELECT statement for `table`.
    """
    return StmtBuilder(table, dialect).build_query_stmt(cols, conds)


def update(table: str, dialect: Dialect | str, cols: Pairs,
           conds: Pairs = None) -> str:
    """Build an UPDATE statement for `table`.

    Returns an empty string when there are no columns to set.
    """
    return StmtBuilder(table, dialect).build_update_stmt(cols, conds)


def delete(table: str, dialect: Dialect | str, conds: Pairs = None) -> str:
    """Build a DELETE statement for `table`.
    """
    return StmtBuilder(table, dialect).build_delete_stmt(conds)


__all__ = [
    'KV',
    'PLACEHOLDER',
    'BuilderOptions',
    'Dialect',
    'StmtBuilder',
    'StmtBuilderError',
    'ValidationError',
    'create_builder',
    'delete',
    'get_available_dialects',
    'get_dialect_name',
    'insert',
    'is_supported_dialect',
    'quote_identifier',
    'select',
    'update',
]
