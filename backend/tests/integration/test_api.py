"""Integration tests for the HTTP API"""

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from finance_engine.deps import get_catalog_repository
from finance_engine.main import app
from finance_engine.repositories.catalog_repository import CatalogRepository

from factories import write_catalog

ESTIMATE_URL = "/api/v1/pricing-estimate"


@pytest.fixture
def missing_catalog_client(tmp_path: Path):
    """Client whose repository points at files that do not exist"""
    repository = CatalogRepository(rules_path=tmp_path / "absent.json", fallback_path=None)
    app.dependency_overrides[get_catalog_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==================== Pricing estimate ====================


def test_estimate_default_scenario(client: TestClient):
    """Test the default request prices the Georgia lender"""
    response = client.post(ESTIMATE_URL, json={"state": "GA", "score": 700})

    assert response.status_code == 200
    body = response.json()

    assert body["meta"]["version"] == "test-1"
    assert body["band"] == {"id": "700-749", "min": 700, "max": 749}
    assert body["inputs"]["vehiclePrice"] == 20000
    assert body["inputs"]["product"] == "auto-used"

    assert len(body["results"]) == 1
    offer = body["results"][0]
    assert offer["lenderId"] == "ga-credit-union"
    assert offer["lenderName"] == "Georgia Credit Union"
    assert offer["aprLow"] == pytest.approx(0.075)
    assert offer["aprHigh"] == pytest.approx(0.085)
    assert offer["term"] == 60
    assert offer["loanAmount"] == 19200
    assert offer["paymentLow"] < offer["paymentHigh"]
    assert offer["notes"] == ["Used vehicle add-on included"]
    assert offer["caps"] == {"maxLTV": 1.2, "minYear": 2012, "maxMiles": 120000}


def test_estimate_without_body_uses_defaults(client: TestClient):
    """Test an empty request echoes every default"""
    response = client.post(ESTIMATE_URL)

    assert response.status_code == 200
    assert response.json()["inputs"] == {
        "state": "GA",
        "score": 700,
        "vehiclePrice": 20000,
        "downPayment": 2000,
        "tradeInValue": 0,
        "estTaxesAndFees": 1200,
        "term": 60,
        "vehicleYear": 2018,
        "mileage": 80000,
        "product": "auto-used",
    }


def test_estimate_no_eligible_lenders(client: TestClient):
    """Test an ineligible state returns an empty result list"""
    response = client.post(ESTIMATE_URL, json={"state": "fl"})

    assert response.status_code == 200
    body = response.json()
    assert body["inputs"]["state"] == "FL"
    assert body["results"] == []


def test_estimate_score_out_of_range(client: TestClient):
    """Test scores outside every band return 400"""
    response = client.post(ESTIMATE_URL, json={"score": 200})

    assert response.status_code == 400
    assert response.json() == {"error": "Score out of supported range"}


def test_estimate_non_numeric_score(client: TestClient):
    """Test malformed field values return 400 with an error message"""
    response = client.post(ESTIMATE_URL, json={"score": "excellent"})

    assert response.status_code == 400
    assert "score" in response.json()["error"]


def test_estimate_non_positive_term(client: TestClient):
    """Test a zero term returns 400"""
    response = client.post(ESTIMATE_URL, json={"term": 0})

    assert response.status_code == 400
    assert "term" in response.json()["error"].lower()


def test_estimate_oversized_price(client: TestClient):
    """Test amounts too large to price return 400 rather than a server error"""
    response = client.post(ESTIMATE_URL, json={"vehiclePrice": 1e28})

    assert response.status_code == 400
    assert "too large to price" in response.json()["error"]


def test_estimate_rejects_non_object_body(client: TestClient):
    """Test a JSON array body returns 400"""
    response = client.post(ESTIMATE_URL, json=[1, 2, 3])

    assert response.status_code == 400
    assert "error" in response.json()


def test_estimate_requires_post(client: TestClient):
    """Test GET on the estimate endpoint is not allowed"""
    response = client.get(ESTIMATE_URL)

    assert response.status_code == 405


def test_estimate_without_catalog(missing_catalog_client: TestClient):
    """Test a missing rule catalog is reported as an error response"""
    response = missing_catalog_client.post(ESTIMATE_URL, json={})

    assert response.status_code == 400
    assert "not found" in response.json()["error"]


# ==================== Catalog ====================


def test_catalog_summary(client: TestClient):
    """Test catalog overview counts"""
    response = client.get("/api/v1/catalog")

    assert response.status_code == 200
    assert response.json() == {
        "meta": {"version": "test-1", "currency": "USD"},
        "scoreBandCount": 4,
        "lenderCount": 1,
    }


def test_list_score_bands(client: TestClient):
    """Test score bands are listed in catalog order"""
    response = client.get("/api/v1/catalog/score-bands")

    assert response.status_code == 200
    assert [band["id"] for band in response.json()] == [
        "300-579",
        "580-699",
        "700-749",
        "750-850",
    ]


def test_list_lenders(client: TestClient):
    """Test lender listing"""
    response = client.get("/api/v1/catalog/lenders")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    lender = body["items"][0]
    assert lender["id"] == "ga-credit-union"
    assert lender["states"] == ["GA"]
    assert lender["terms"] == [36, 48, 60, 72]
    assert lender["baseAprByBand"] == {"700-749": 0.07, "750-850": 0.055}
    assert lender["adjusterCount"] == 1


def test_get_lender(client: TestClient):
    """Test retrieving one lender"""
    response = client.get("/api/v1/catalog/lenders/ga-credit-union")

    assert response.status_code == 200
    assert response.json()["name"] == "Georgia Credit Union"


def test_get_lender_not_found(client: TestClient):
    """Test unknown lender ids return 404"""
    response = client.get("/api/v1/catalog/lenders/unknown")

    assert response.status_code == 404


def test_catalog_endpoints_read_through_repository(
    client: TestClient,
    repository: CatalogRepository,
    catalog_path: Path,
    catalog_data: dict[str, Any],
):
    """Test catalog endpoints serve what the repository holds after a reload"""
    catalog_data["lenders"][0]["id"] = "ga-credit-union-2"
    catalog_data["scoreBands"] = catalog_data["scoreBands"][:2]
    write_catalog(catalog_path, catalog_data)
    repository.reload()

    assert client.get("/api/v1/catalog/lenders/ga-credit-union").status_code == 404
    assert client.get("/api/v1/catalog/lenders/ga-credit-union-2").status_code == 200
    assert client.get("/api/v1/catalog/lenders").json()["items"][0]["id"] == "ga-credit-union-2"
    assert len(client.get("/api/v1/catalog/score-bands").json()) == 2


def test_catalog_endpoints_without_catalog(missing_catalog_client: TestClient):
    """Test catalog reads report a missing rule catalog as an error response"""
    response = missing_catalog_client.get("/api/v1/catalog/lenders")

    assert response.status_code == 400
    assert "not found" in response.json()["error"]


# ==================== Service ====================


def test_health_check(client: TestClient):
    """Test health reports a loadable catalog"""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "api": "healthy", "catalog": "healthy"}


def test_health_check_degraded(missing_catalog_client: TestClient):
    """Test health stays up but degraded without a catalog"""
    response = missing_catalog_client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["catalog"].startswith("unhealthy")


def test_root(client: TestClient):
    """Test the root banner"""
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/api/docs"
