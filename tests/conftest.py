import pytest

from wardrobe_scoring.core.taxonomy import get_taxonomy
from tests.fixtures import black_tshirt_fixture, coverage_fixture


@pytest.fixture(autouse=True)
def fresh_taxonomy():
    get_taxonomy.cache_clear()
    yield
    get_taxonomy.cache_clear()


@pytest.fixture
def black_tee():
    return black_tshirt_fixture()


@pytest.fixture
def expansion_coverage():
    return [coverage_fixture("expansion")]
