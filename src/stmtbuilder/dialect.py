"""
SQL dialects supported by the statement builder.

A dialect decides two things about emitted text: how identifiers are quoted
and how bound parameters are written. Names coming from configuration or
from a driver are resolved through `get_dialect()`.
"""
from enum import Enum
from functools import lru_cache

__all__ = [
    'Dialect',
    'get_available_dialects',
    'get_dialect',
    'is_supported_dialect',
]


class Dialect(Enum):
    """The type of database.
    """
    MYSQL = 'mysql'
    POSTGRESQL = 'postgresql'
    SQLITE = 'sqlite'

    @property
    def uses_positional_placeholders(self) -> bool:
        """Whether bound parameters are written as `$N` instead of `?`."""
        return self is Dialect.POSTGRESQL

    @classmethod
    def from_name(cls, name: 'str | Dialect') -> 'Dialect':
        """Resolve a dialect from its name or a driver alias.

        Raises
            ValueError: If the name is not a known dialect
        """
        if isinstance(name, cls):
            return name
        return get_dialect(name)


# Driver and product names that map onto a supported dialect
_ALIASES: dict[str, Dialect] = {
    'mysql': Dialect.MYSQL,
    'mariadb': Dialect.MYSQL,
    'postgresql': Dialect.POSTGRESQL,
    'postgres': Dialect.POSTGRESQL,
    'psycopg': Dialect.POSTGRESQL,
    'psycopg2': Dialect.POSTGRESQL,
    'sqlite': Dialect.SQLITE,
    'sqlite3': Dialect.SQLITE,
}


@lru_cache(maxsize=32)
def get_dialect(name: str) -> Dialect:
    """Get the dialect for a name, case-insensitively."""
    dialect = _ALIASES.get(str(name).strip().lower())
    if dialect is None:
        available = get_available_dialects()
        raise ValueError(f'Unsupported dialect: {name}. Available: {available}')
    return dialect


def get_available_dialects() -> list[str]:
    """Return list of supported dialect names."""
    return [dialect.value for dialect in Dialect]


def is_supported_dialect(name: str) -> bool:
    """Check if a dialect name (or alias) is supported."""
    return str(name).strip().lower() in _ALIASES
