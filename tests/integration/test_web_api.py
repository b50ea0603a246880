"""Integration tests for the REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from furniture.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(create_app())


@pytest.fixture
def bookcase_entry() -> dict:
    """Open bookcase furniture entry with two shelves."""
    return {
        "id": "bookcase",
        "type": "bookcase",
        "params": {
            "total_width": 900,
            "total_height": 2000,
            "total_depth": 300,
            "has_back": False,
        },
        "modules": [{"id": "shelves", "type": "shelf", "params": {"count": 2}}],
    }


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestGenerateEndpoint:
    """Tests for POST /api/v1/generate."""

    def test_generate(self, client: TestClient, bookcase_entry: dict) -> None:
        response = client.post("/api/v1/generate", json={"furniture": bookcase_entry})

        assert response.status_code == 200
        data = response.json()
        assert data["furniture_id"] == "bookcase"
        assert data["family"] == "bookcase"
        assert data["parts"][0]["code"] == "A"
        assert data["cost"]["margin_percent"] == 30.0
        assert data["assembly_steps"][0]["step_number"] == 1

    def test_margin(self, client: TestClient, bookcase_entry: dict) -> None:
        response = client.post(
            "/api/v1/generate", json={"furniture": bookcase_entry, "margin_percent": 0}
        )

        cost = response.json()["cost"]
        assert cost["sale_price"] == cost["subtotal"]

    def test_catalog_override(self, client: TestClient, bookcase_entry: dict) -> None:
        """Request catalogs replace bundled entries for that request only."""
        free_mdf = {
            "name": "Free MDF",
            "material_type": "mdf",
            "price_per_sqm": 0,
            "standard_thicknesses": [18],
        }

        response = client.post(
            "/api/v1/generate",
            json={"furniture": bookcase_entry, "catalogs": {"materials": {"mdf_18": free_mdf}}},
        )
        baseline = client.post("/api/v1/generate", json={"furniture": bookcase_entry})

        assert response.json()["bom"]["total_materials"] == 0
        assert baseline.json()["bom"]["total_materials"] > 0

    def test_unsupported_combination(self, client: TestClient, bookcase_entry: dict) -> None:
        bookcase_entry["modules"] = [{"id": "rail", "type": "hanging_rail"}]

        response = client.post("/api/v1/generate", json={"furniture": bookcase_entry})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "unsupported_combination"
        assert "does not support hanging_rail modules" in data["error"]

    def test_out_of_range_params(self, client: TestClient, bookcase_entry: dict) -> None:
        bookcase_entry["params"]["total_width"] = 100

        response = client.post("/api/v1/generate", json={"furniture": bookcase_entry})

        assert response.status_code == 422


class TestQuoteEndpoint:
    """Tests for POST /api/v1/quote."""

    def test_quote(self, client: TestClient, project_data: dict) -> None:
        response = client.post("/api/v1/quote", json={"config": project_data})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Test flat"
        assert data["currency"] == "EUR"
        assert len(data["furnitures"]) == 2
        assert data["errors"] == []

    def test_quote_with_invalid_furniture(self, client: TestClient, project_data: dict) -> None:
        project_data["furnitures"][1]["modules"] = [{"id": "rail", "type": "hanging_rail"}]

        response = client.post("/api/v1/quote", json={"config": project_data})

        assert response.status_code == 200
        data = response.json()
        assert [f["furniture_id"] for f in data["furnitures"]] == ["wardrobe"]
        assert data["errors"][0]["furniture_id"] == "bookcase"
        assert data["errors"][0]["error_type"] == "unsupported_combination"

    def test_out_of_range_furniture(self, client: TestClient, project_data: dict) -> None:
        project_data["furnitures"][0]["params"]["total_width"] = 100

        response = client.post("/api/v1/quote", json={"config": project_data})

        assert response.status_code == 200
        error = response.json()["errors"][0]
        assert error["error_type"] == "params"
        assert error["details"][0]["path"] == "params.total_width"

    def test_schema_error(self, client: TestClient, project_data: dict) -> None:
        project_data["furnitures"][0]["params"]["total_width"] = -1

        response = client.post("/api/v1/quote", json={"config": project_data})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "furnitures[0].params.total_width"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, project_data: dict) -> None:
        response = client.post("/api/v1/validate", json={"config": project_data})

        assert response.status_code == 200
        assert response.json()["is_valid"] is True

    def test_schema_error_is_invalid_result(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "1.0", "furnitures": "x"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"]

    def test_warnings(self, client: TestClient, project_data: dict) -> None:
        project_data["project"]["profit_margin"] = 5

        data = client.post("/api/v1/validate", json={"config": project_data}).json()

        assert data["is_valid"] is True
        assert any(w["path"] == "project.profit_margin" for w in data["warnings"])


class TestTemplatesEndpoint:
    """Tests for the template endpoints."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates")

        assert response.status_code == 200
        names = [t["name"] for t in response.json()["templates"]]
        assert "bookcase" in names
        assert len(names) == 7

    def test_get(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/tv-unit")

        assert response.status_code == 200
        data = response.json()
        assert data["description"] == "Low TV unit with a centred niche"
        assert data["content"]["furnitures"][0]["type"] == "tv_unit"

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/spaceship")

        assert response.status_code == 404
        assert response.json() == {
            "error": "Template not found: spaceship",
            "error_type": "not_found",
            "details": None,
        }
