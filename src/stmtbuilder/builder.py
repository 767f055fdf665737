"""
SQL statement builder.

The builder uses string replacement to build SQL statements, so make sure
the table name, column names and values passed in are safe and won't lead
to SQL injection. Use `PLACEHOLDER` for values that should be bound as
parameters; binding is done by the driver and is safe.

The placeholders emitted for each dialect are:

- MySQL: `?`
- PostgreSQL: `$N`, where N is the 1-based positional argument index
- SQLite: `?`

Parameters must be bound in the order their placeholders appear in the
statement, left to right.
"""
import logging
from collections.abc import Iterable
from typing import Any

from stmtbuilder.dialect import Dialect
from stmtbuilder.sql import WILDCARD, PlaceholderCounter, build_conditions
from stmtbuilder.sql import quote_identifier
from stmtbuilder.types import Pairs, normalize_columns, normalize_pairs
from stmtbuilder.utils import get_dialect_name

logger = logging.getLogger(__name__)

__all__ = ['StmtBuilder']


class StmtBuilder:
    """Builds INSERT, SELECT, UPDATE and DELETE statements for one table.

    The table name and dialect are fixed at construction. Every build call
    starts its own placeholder numbering, so an instance can be shared
    freely between threads.

    Example:
        >>> sb = StmtBuilder('my_tbl', Dialect.POSTGRESQL)
        >>> sb.build_query_stmt(['username'], [('age', PLACEHOLDER)])
        'SELECT "username" FROM my_tbl WHERE age = $1'
    """

    __slots__ = ('_table', '_dialect')

    def __init__(self, table: str, dialect: Dialect | str) -> None:
        """Create a builder for `table` using `dialect`.

        Args:
            table: Table name, embedded in statements verbatim
            dialect: Dialect or dialect name such as 'postgresql'
        """
        self._table = table
        self._dialect = Dialect.from_name(dialect)

    @classmethod
    def for_connection(cls, table: str, cn: Any) -> 'StmtBuilder':
        """Create a builder whose dialect matches a connection or engine.

        The connection is only inspected, never used.
        """
        return cls(table, get_dialect_name(cn))

    @property
    def table(self) -> str:
        """Table name."""
        return self._table

    @property
    def dialect(self) -> Dialect:
        """Database dialect."""
        return self._dialect

    def __repr__(self) -> str:
        return f'{type(self).__name__}(table={self._table!r}, dialect={self._dialect.value!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StmtBuilder):
            return NotImplemented
        return (self._table, self._dialect) == (other._table, other._dialect)

    def __hash__(self) -> int:
        return hash((self._table, self._dialect))

    def _new_counter(self) -> PlaceholderCounter:
        return PlaceholderCounter(self._dialect)

    def _escape_col(self, col: str) -> str:
        return quote_identifier(col, self._dialect)

    def build_insert_stmt(self, cols: Pairs) -> str:
        """Build a statement that performs an insert operation.

        Args:
            cols: Column names and values. If empty, '' is returned.

        Returns
            SQL statement

        Example:
            >>> sb = StmtBuilder('my_tbl', Dialect.MYSQL)
            >>> sb.build_insert_stmt([('username', PLACEHOLDER), ('nickname', "'foo'"),
            ...                       ('create_at', 'NOW()')])
            "INSERT INTO my_tbl (`username`, `nickname`, `create_at`) VALUES (?, 'foo', NOW())"
        """
        pairs = normalize_pairs(cols)
        if not pairs:
            logger.debug(f'No columns to insert into {self._table}, skipping')
            return ''

        counter = self._new_counter()
        keys = ', '.join(self._escape_col(kv.key) for kv in pairs)
        vals = ', '.join(counter.convert(kv.val) for kv in pairs)

        sql = f'INSERT INTO {self._table} ({keys}) VALUES ({vals})'
        logger.debug(f'Built insert statement: {sql}')
        return sql

    def build_query_stmt(self, cols: Iterable[str] | None = None,
                         conds: Pairs = None) -> str:
        """Build a statement that performs a query operation.

        Args:
            cols: Selected columns. If empty, all columns are selected.
            conds: Equality conditions, joined with AND

        Returns
            SQL statement

        Example:
            >>> sb = StmtBuilder('my_tbl', Dialect.POSTGRESQL)
            >>> sb.build_query_stmt(['username', 'nickname'],
            ...                     [('age', PLACEHOLDER), ('gender', PLACEHOLDER)])
            'SELECT "username", "nickname" FROM my_tbl WHERE age = $1 AND gender = $2'
        """
        columns = normalize_columns(cols)
        if columns:
            cols_str = ', '.join(self._escape_col(col) for col in columns)
        else:
            cols_str = WILDCARD

        where = build_conditions(normalize_pairs(conds), self._new_counter())

        sql = f'SELECT {cols_str} FROM {self._table}{where}'
        logger.debug(f'Built query statement: {sql}')
        return sql

    def build_update_stmt(self, cols: Pairs, conds: Pairs = None) -> str:
        """Build a statement that performs an update operation.

        Placeholders in the SET clause are numbered before those in the
        WHERE clause.

        Args:
            cols: Column names and values. If empty, '' is returned.
            conds: Equality conditions, joined with AND

        Returns
            SQL statement

        Example:
            >>> sb = StmtBuilder('my_tbl', Dialect.POSTGRESQL)
            >>> sb.build_update_stmt([('username', PLACEHOLDER), ('update_at', 'NOW()')],
            ...                      [('age', PLACEHOLDER)])
            'UPDATE my_tbl SET "username" = $1, "update_at" = NOW() WHERE age = $2'
        """
        pairs = normalize_pairs(cols)
        if not pairs:
            logger.debug(f'No columns to update in {self._table}, skipping')
            return ''

        counter = self._new_counter()
        assignments = ', '.join(
            f'{self._escape_col(kv.key)} = {counter.convert(kv.val)}' for kv in pairs
        )
        where = build_conditions(normalize_pairs(conds), counter)

        sql = f'UPDATE {self._table} SET {assignments}{where}'
        logger.debug(f'Built update statement: {sql}')
        return sql

    def build_delete_stmt(self, conds: Pairs = None) -> str:
        """Build a statement that performs a delete operation.

        An empty condition list deletes every row.

        Args:
            conds: Equality conditions, joined with AND

        Returns
            SQL statement

        Example:
            >>> sb = StmtBuilder('my_tbl', Dialect.SQLITE)
            >>> sb.build_delete_stmt([('username', PLACEHOLDER), ('age', '25')])
            'DELETE FROM my_tbl WHERE username = ? AND age = 25'
        """
        where = build_conditions(normalize_pairs(conds), self._new_counter())

        sql = f'DELETE FROM {self._table}{where}'
        logger.debug(f'Built delete statement: {sql}')
        return sql
