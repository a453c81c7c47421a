import pytest

from tastematch.services import CatalogStore, MatchingEngine, seed_demo_catalog


@pytest.fixture
def store():
    catalog = CatalogStore()
    seed_demo_catalog(catalog)
    return catalog


@pytest.fixture
def empty_store():
    return CatalogStore()


@pytest.fixture
def engine(store):
    return MatchingEngine(store)
