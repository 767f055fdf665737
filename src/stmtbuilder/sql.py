"""
Dialect-specific SQL text fragments.

Three building blocks shared by every statement:

- `quote_identifier()` - Quote a column name for the dialect
- `PlaceholderCounter` - Convert the neutral `?` marker to dialect syntax
- `build_conditions()` - Compose an AND-joined equality WHERE clause

PostgreSQL numbers its parameters (`$1`, `$2`, ...) by position across the
whole statement, so a single counter must be threaded through every clause
in the order the values appear in the final text.
"""
from collections.abc import Iterable
from dataclasses import dataclass

from stmtbuilder.dialect import Dialect
from stmtbuilder.types import KV, PLACEHOLDER

__all__ = [
    'PG_PLACEHOLDER_BEGIN_IDX',
    'WILDCARD',
    'PlaceholderCounter',
    'build_conditions',
    'quote_identifier',
]

PG_PLACEHOLDER_BEGIN_IDX = 1

WILDCARD = '*'


def quote_identifier(identifier: str, dialect: Dialect | str) -> str:
    """Quote a column name using the dialect's identifier syntax.

    The wildcard `*` is returned as is. Embedded quote characters are not
    escaped, the identifier is trusted.

    Parameters
        identifier: Column name
        dialect: Database dialect

    Returns
        Quoted identifier
    """
    if identifier == WILDCARD:
        return identifier

    dialect = Dialect.from_name(dialect)
    if dialect is Dialect.MYSQL:
        return f'`{identifier}`'
    return f'"{identifier}"'


@dataclass(slots=True)
class PlaceholderCounter:
    """Running parameter index for one statement.

    Create a new counter for every statement and call `convert()` on each
    value in the order it is emitted.
    """
    dialect: Dialect
    index: int = PG_PLACEHOLDER_BEGIN_IDX

    def convert(self, val: str) -> str:
        """Translate a value, numbering it if it is the placeholder marker.

        MySQL and SQLite bind `?` natively, so values always pass through.
        For PostgreSQL the marker becomes `$N` and the index advances.
        """
        if not self.dialect.uses_positional_placeholders:
            return val
        if val != PLACEHOLDER:
            return val
        placeholder = f'${self.index}'
        self.index += 1
        return placeholder

    @property
    def count(self) -> int:
        """Number of placeholders numbered so far."""
        return self.index - PG_PLACEHOLDER_BEGIN_IDX


def build_conditions(conds: Iterable[KV], counter: PlaceholderCounter) -> str:
    """Build a WHERE clause from equality conditions.

    Condition keys are emitted verbatim. Values go through `counter` in
    order so their numbering continues from any preceding clause.

    Returns
        ' WHERE k1 = v1 AND k2 = v2', or '' when there are no conditions
    """
    predicates = [f'{kv.key} = {counter.convert(kv.val)}' for kv in conds]
    if not predicates:
        return ''
    return ' WHERE ' + ' AND '.join(predicates)
