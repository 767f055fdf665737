from dataclasses import dataclass

from stmtbuilder.dialect import get_available_dialects, is_supported_dialect

from libb import ConfigOptions

__all__ = ['BuilderOptions']


@dataclass
class BuilderOptions(ConfigOptions):
    """Options

    supported driver names: `mysql`, `postgresql`, `sqlite`
    (aliases such as `mariadb`, `postgres` and `sqlite3` are accepted)

    - drivername: Dialect the statements are written for (default: postgresql)
    - table: Table the statements operate on, embedded verbatim
    """
    drivername: str = 'postgresql'
    table: str = None

    def __post_init__(self):
        if not is_supported_dialect(self.drivername):
            available = get_available_dialects()
            raise ValueError(f'drivername must be one of: {available}')
        if not self.table:
            raise ValueError('table must be provided')
