"""Unit tests for SQL fragments.

Tests the public API:
- quote_identifier(name, dialect) - Quote column names
- PlaceholderCounter(dialect).convert(val) - Translate the ? marker
- build_conditions(conds, counter) - Compose WHERE clauses
"""
import pytest
from stmtbuilder.dialect import Dialect
from stmtbuilder.sql import PG_PLACEHOLDER_BEGIN_IDX, PlaceholderCounter
from stmtbuilder.sql import build_conditions, quote_identifier
from stmtbuilder.types import KV, PLACEHOLDER


class TestQuoteIdentifier:

    @pytest.mark.parametrize(('identifier', 'dialect', 'expected'), [
        ('username', Dialect.MYSQL, '`username`'),
        ('username', Dialect.POSTGRESQL, '"username"'),
        ('username', Dialect.SQLITE, '"username"'),
        ('user name', 'mysql', '`user name`'),
        ('username', 'postgres', '"username"'),
    ])
    def test_quoting(self, identifier, dialect, expected):
        assert quote_identifier(identifier, dialect) == expected

    @pytest.mark.parametrize('dialect', list(Dialect))
    def test_wildcard_unchanged(self, dialect):
        assert quote_identifier('*', dialect) == '*'

    def test_embedded_quotes_not_escaped(self):
        assert quote_identifier('a"b', Dialect.POSTGRESQL) == '"a"b"'
        assert quote_identifier('a`b', Dialect.MYSQL) == '`a`b`'

    def test_unknown_dialect(self):
        with pytest.raises(ValueError):
            quote_identifier('username', 'oracle')


class TestPlaceholderCounter:

    @pytest.mark.parametrize('dialect', [Dialect.MYSQL, Dialect.SQLITE])
    def test_native_placeholders_pass_through(self, dialect):
        counter = PlaceholderCounter(dialect)
        assert [counter.convert(PLACEHOLDER) for _ in range(3)] == ['?', '?', '?']
        assert counter.index == PG_PLACEHOLDER_BEGIN_IDX
        assert counter.count == 0

    def test_postgres_numbering(self):
        counter = PlaceholderCounter(Dialect.POSTGRESQL)
        assert counter.convert(PLACEHOLDER) == '$1'
        assert counter.convert("'foo'") == "'foo'"
        assert counter.convert(PLACEHOLDER) == '$2'
        assert counter.convert('NOW()') == 'NOW()'
        assert counter.convert(PLACEHOLDER) == '$3'
        assert counter.count == 3

    @pytest.mark.parametrize('value', ['??', ' ?', '$1', "'?'", ''])
    def test_only_exact_marker_is_numbered(self, value):
        counter = PlaceholderCounter(Dialect.POSTGRESQL)
        assert counter.convert(value) == value
        assert counter.count == 0

    def test_start_index(self):
        counter = PlaceholderCounter(Dialect.POSTGRESQL, index=5)
        assert counter.convert(PLACEHOLDER) == '$5'


class TestBuildConditions:

    def test_empty(self):
        counter = PlaceholderCounter(Dialect.POSTGRESQL)
        assert build_conditions([], counter) == ''
        assert counter.count == 0

    def test_single(self):
        counter = PlaceholderCounter(Dialect.SQLITE)
        assert build_conditions([KV('id', PLACEHOLDER)], counter) == ' WHERE id = ?'

    def test_keys_not_escaped(self):
        counter = PlaceholderCounter(Dialect.MYSQL)
        conds = [KV('age', PLACEHOLDER), KV('gender', "'male'")]
        assert build_conditions(conds, counter) == " WHERE age = ? AND gender = 'male'"

    def test_numbering_continues_from_counter(self):
        counter = PlaceholderCounter(Dialect.POSTGRESQL)
        counter.convert(PLACEHOLDER)
        counter.convert(PLACEHOLDER)
        conds = [KV('a', PLACEHOLDER), KV('b', '1'), KV('c', PLACEHOLDER)]
        assert build_conditions(conds, counter) == ' WHERE a = $3 AND b = 1 AND c = $4'
        assert counter.count == 4


if __name__ == '__main__':
    pytest.main([__file__])
