"""Pytest fixtures for testing"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from finance_engine.deps import get_catalog_repository
from finance_engine.main import app
from finance_engine.models.domain.catalog import Catalog
from finance_engine.repositories.catalog_repository import CatalogRepository, load_catalog
from finance_engine.services.financing_engine import FinancingEngine

from factories import write_catalog

SAMPLE_CATALOG: dict[str, Any] = {
    "meta": {"version": "test-1", "currency": "USD"},
    "scoreBands": [
        {"id": "300-579", "min": 300, "max": 579},
        {"id": "580-699", "min": 580, "max": 699},
        {"id": "700-749", "min": 700, "max": 749},
        {"id": "750-850", "min": 750, "max": 850},
    ],
    "lenders": [
        {
            "id": "ga-credit-union",
            "name": "Georgia Credit Union",
            "states": ["GA"],
            "products": ["auto-used", "auto-new"],
            "terms": [36, 48, 60, 72],
            "baseAprByBand": {"700-749": 0.07, "750-850": 0.055},
            "caps": {"maxLTV": 1.2, "minYear": 2012, "maxMiles": 120000},
            "adjusters": [
                {"when": {"used": True, "ltvMax": 1.0}, "aprAdd": 0.01},
            ],
        },
    ],
}


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """Editable copy of the single-lender sample catalog"""
    return deepcopy(SAMPLE_CATALOG)


@pytest.fixture
def catalog_path(tmp_path: Path, catalog_data: dict[str, Any]) -> Path:
    """Sample catalog written to a temporary rules file"""
    return write_catalog(tmp_path / "rules.json", catalog_data)


@pytest.fixture
def catalog(catalog_path: Path) -> Catalog:
    """Parsed sample catalog"""
    return load_catalog(catalog_path)


@pytest.fixture
def engine(catalog: Catalog) -> FinancingEngine:
    """Financing engine over the sample catalog"""
    return FinancingEngine(catalog)


@pytest.fixture
def repository(catalog_path: Path) -> CatalogRepository:
    """Repository reading only the sample catalog"""
    return CatalogRepository(rules_path=catalog_path, fallback_path=None)


@pytest.fixture
def client(repository: CatalogRepository) -> Generator[TestClient, None, None]:
    """FastAPI test client reading the sample catalog"""
    app.dependency_overrides[get_catalog_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
