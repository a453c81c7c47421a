"""Catalog store, matching engine and demo data."""

from tastematch.services.catalog import CatalogStore
from tastematch.services.matching import MatchingEngine
from tastematch.services.seed import seed_demo_catalog

__all__ = [
    "CatalogStore",
    "MatchingEngine",
    "seed_demo_catalog",
]
