"""Dialect detection for connection objects.

Works with DB-API connections, SQLAlchemy engines and connections, and
wrappers exposing them. Has no imports from other stmtbuilder modules and
never touches the connection beyond reading attributes.
"""
import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Driver module prefix -> dialect name
_DRIVER_MODULES = (
    ('psycopg', 'postgresql'),
    ('pg8000', 'postgresql'),
    ('sqlite3', 'sqlite'),
    ('pymysql', 'mysql'),
    ('MySQLdb', 'mysql'),
    ('mysql', 'mysql'),
    ('mariadb', 'mysql'),
)


def get_dialect_name(obj: Any) -> str:
    """Get dialect name for a database connection or engine.
    """
    if hasattr(obj, 'dialect'):
        dialect = obj.dialect
        if isinstance(dialect, str):
            return dialect.lower()
        if isinstance(dialect, Enum):
            return str(dialect.value).lower()
        return str(dialect.name).lower()

    if hasattr(obj, 'engine') and hasattr(obj.engine, 'dialect'):
        return str(obj.engine.dialect.name).lower()

    if hasattr(obj, 'sa_connection') and hasattr(obj.sa_connection, 'engine'):
        return str(obj.sa_connection.engine.dialect.name).lower()

    if hasattr(obj, 'dbapi_connection'):
        return get_dialect_name(obj.dbapi_connection)

    module = type(obj).__module__
    for prefix, name in _DRIVER_MODULES:
        if module == prefix or module.startswith(prefix + '.'):
            logger.debug(f'Detected {name} dialect from driver module {module}')
            return name

    raise AttributeError(f'Cannot determine dialect for {type(obj)}')
