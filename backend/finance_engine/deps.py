"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache

from fastapi import Depends

from finance_engine.config import settings
from finance_engine.models.domain.catalog import Catalog
from finance_engine.repositories.catalog_repository import CatalogRepository
from finance_engine.services.financing_engine import FinancingEngine


@lru_cache
def get_catalog_repository() -> CatalogRepository:
    """Process-wide catalog repository built from settings."""
    return CatalogRepository(rules_path=settings.RULES_PATH)


def get_catalog(
    repository: CatalogRepository = Depends(get_catalog_repository),
) -> Catalog:
    """
    Get the loaded rule catalog.

    Raises:
        ConfigurationError: If the catalog cannot be loaded
    """
    return repository.load()


def get_financing_engine(catalog: Catalog = Depends(get_catalog)) -> FinancingEngine:
    """Financing engine bound to the current catalog."""
    return FinancingEngine(catalog)
