"""
Column/value pairs and the neutral placeholder marker.

Builder operations accept pairs in any of these shapes, all normalized to a
tuple of `KV` in the order given:

- a sequence of `KV`
- a sequence of `(key, val)` 2-item sequences
- a mapping `{key: val}`
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from stmtbuilder.exceptions import ValidationError

from libb import issequence

__all__ = ['KV', 'PLACEHOLDER', 'Pairs', 'normalize_columns', 'normalize_pairs']

# Placeholder for binding a parameter
PLACEHOLDER = '?'


@dataclass(frozen=True, slots=True)
class KV:
    """Key-value pair used as a column assignment or an equality condition.

    Both fields are inserted into statements verbatim.
    """
    key: str
    val: str

    def __iter__(self):
        yield self.key
        yield self.val


Pairs = Iterable[KV] | Iterable[tuple[str, Any]] | Mapping[str, Any] | None


def _render_value(val: Any) -> str:
    """Render a value as SQL text. Strings pass through untouched."""
    if val is None:
        return 'NULL'
    if isinstance(val, str):
        return val
    return str(val)


def _to_kv(pair: Any) -> KV:
    if isinstance(pair, KV):
        if isinstance(pair.key, str) and isinstance(pair.val, str):
            return pair
        return KV(key=str(pair.key), val=_render_value(pair.val))
    if not issequence(pair) or isinstance(pair, str) or len(pair) != 2:
        raise ValidationError(f'Expected a (key, value) pair, got {pair!r}')
    key, val = pair
    return KV(key=str(key), val=_render_value(val))


def normalize_pairs(pairs: Pairs) -> tuple[KV, ...]:
    """Convert column/value pairs or conditions into a tuple of `KV`.

    Parameters
        pairs: Sequence of KV or 2-item sequences, a mapping, or None

    Returns
        Tuple of KV, empty when `pairs` is empty or None

    Raises
        ValidationError: If an item is not a (key, value) pair
    """
    if not pairs:
        return ()
    if isinstance(pairs, Mapping):
        return tuple(KV(key=str(k), val=_render_value(v)) for k, v in pairs.items())
    if isinstance(pairs, str):
        raise ValidationError(f'Expected (key, value) pairs, got {pairs!r}')
    return tuple(_to_kv(pair) for pair in pairs)


def normalize_columns(cols: Iterable[str] | str | None) -> tuple[str, ...]:
    """Convert selected column names into a tuple. A bare string is one column."""
    if not cols:
        return ()
    if isinstance(cols, str):
        return (cols,)
    return tuple(str(col) for col in cols)
