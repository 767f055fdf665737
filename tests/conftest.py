import pathlib
import site

import pytest
from stmtbuilder.dialect import get_dialect

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear the dialect name cache before and after each test to ensure test isolation."""
    get_dialect.cache_clear()
    yield
    get_dialect.cache_clear()


pytest_plugins = [
    'tests.fixtures.mocks',
    'tests.fixtures.builders',
]
