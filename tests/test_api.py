"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from shop.config import Settings
from shop.main import Application


PRODUCTS_URL = "/api/v1/products"


def add(client: TestClient, product_id: str, name: str, producer: str):
    return client.post(
        PRODUCTS_URL,
        json={"id": product_id, "name": name, "producer": producer}
    )


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    """Client whose catalog holds the four 'Some' products."""
    add(client, "3", "Some Product3", "Some Producer2")
    add(client, "4", "Some Product1", "Some Producer3")
    add(client, "2", "Some Product2", "Some Producer2")
    add(client, "1", "Some Product1", "Some Producer1")
    return client


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 0

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestProductMutation:
    """Tests for add and delete endpoints."""

    def test_add_product(self, client: TestClient):
        """Test adding a product returns 201."""
        response = add(client, "1", "Tea", "Acme")
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["product"] == {"id": "1", "name": "Tea", "producer": "Acme"}

    def test_add_duplicate_id(self, client: TestClient):
        """Test duplicate id returns 409 and leaves the catalog alone."""
        add(client, "1", "Tea", "Acme")
        response = add(client, "1", "Coffee", "Other")
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "PRODUCT_EXISTS"
        assert error["details"]["product_id"] == "1"

        product = client.get(f"{PRODUCTS_URL}/1").json()["product"]
        assert product["name"] == "Tea"

    def test_add_invalid_body(self, client: TestClient):
        """Test missing fields are rejected."""
        response = client.post(PRODUCTS_URL, json={"id": "1", "name": "Tea"})
        assert response.status_code == 422

    def test_delete_product(self, client: TestClient):
        """Test deleting an existing product."""
        add(client, "1", "Tea", "Acme")
        response = client.delete(f"{PRODUCTS_URL}/1")
        assert response.status_code == 200
        assert response.json()["success"] is True

        assert client.get(f"{PRODUCTS_URL}/1").status_code == 404

    def test_delete_missing_product(self, client: TestClient):
        """Test deleting an unknown id returns 404."""
        response = client.delete(f"{PRODUCTS_URL}/missing")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    def test_readd_after_delete(self, client: TestClient):
        """Test a deleted id can be reused."""
        add(client, "1", "Tea", "Acme")
        client.delete(f"{PRODUCTS_URL}/1")
        assert add(client, "1", "Tea", "Acme").status_code == 201

    def test_id_with_slash_rejected(self, client: TestClient):
        """Test ids that cannot be addressed by path are refused."""
        response = add(client, "a/b", "Tea", "Acme")
        assert response.status_code == 422
        assert client.get(PRODUCTS_URL).json()["total"] == 0

    @pytest.mark.parametrize("product_id", ["stats", ".", ".."])
    def test_reserved_id_rejected(self, client: TestClient, product_id: str):
        """Test ids shadowed by static routes are refused."""
        response = add(client, product_id, "Tea", "Acme")
        assert response.status_code == 422
        assert client.get(PRODUCTS_URL).json()["total"] == 0

    def test_id_round_trip(self, client: TestClient):
        """Test an accepted id can be fetched and deleted by path."""
        for product_id in ["search", "sku-42", "Stats"]:
            assert add(client, product_id, "Tea", "Acme").status_code == 201
            fetched = client.get(f"{PRODUCTS_URL}/{product_id}")
            assert fetched.status_code == 200
            assert fetched.json()["product"]["id"] == product_id
            assert client.delete(f"{PRODUCTS_URL}/{product_id}").status_code == 200


class TestProductQueries:
    """Tests for list, search and stats endpoints."""

    def test_list_products_in_order(self, seeded_client: TestClient):
        response = seeded_client.get(PRODUCTS_URL)
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert [p["id"] for p in data["products"]] == ["3", "4", "2", "1"]

    def test_search_by_name(self, seeded_client: TestClient):
        response = seeded_client.get(f"{PRODUCTS_URL}/search/name", params={"q": "Some Product"})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 4
        assert data["labels"] == [
            "Some Producer1 - Some Product1",
            "Some Producer3 - Some Product1",
            "Some Product2",
            "Some Product3",
        ]

    def test_search_by_producer(self, seeded_client: TestClient):
        response = seeded_client.get(f"{PRODUCTS_URL}/search/producer", params={"q": "Some Producer"})
        assert response.status_code == 200
        names = response.json()["names"]
        assert names[0] == "Some Product1"
        assert set(names[1:3]) == {"Some Product2", "Some Product3"}
        assert names[3] == "Some Product1"

    def test_search_requires_query(self, client: TestClient):
        assert client.get(f"{PRODUCTS_URL}/search/name").status_code == 422
        assert client.get(f"{PRODUCTS_URL}/search/producer", params={"q": ""}).status_code == 422

    def test_search_empty_catalog(self, client: TestClient):
        response = client.get(f"{PRODUCTS_URL}/search/name", params={"q": "Tea"})
        assert response.json()["labels"] == []

    def test_stats(self, seeded_client: TestClient):
        response = seeded_client.get(f"{PRODUCTS_URL}/stats")
        assert response.status_code == 200
        assert response.json()["data"] == {"total_products": 4, "producers": 3}


class TestApplication:
    """Tests for application wiring."""

    def test_each_application_owns_its_catalog(self, settings: Settings):
        first = Application(settings).app
        second = Application(settings).app

        with TestClient(first) as first_client, TestClient(second) as second_client:
            add(first_client, "1", "Tea", "Acme")
            assert first_client.get(PRODUCTS_URL).json()["total"] == 1
            assert second_client.get(PRODUCTS_URL).json()["total"] == 0

    def test_settings_limits_reach_catalog(self):
        settings = Settings(_env_file=None, producer_search_limit=1)
        app = Application(settings).app

        with TestClient(app) as client:
            add(client, "2", "Two", "Acme")
            add(client, "1", "One", "Acme")
            names = client.get(f"{PRODUCTS_URL}/search/producer", params={"q": "Acme"}).json()["names"]
            assert names == ["One"]

    def test_name_limit_reaches_catalog(self):
        settings = Settings(_env_file=None, name_search_limit=2)
        app = Application(settings).app

        with TestClient(app) as client:
            for product_id in ["1", "2", "3"]:
                add(client, product_id, f"Item{product_id}", "Acme")
            labels = client.get(f"{PRODUCTS_URL}/search/name", params={"q": "Item"}).json()["labels"]
            assert labels == ["Item1", "Item2"]

    def test_case_insensitive_search_reaches_catalog(self):
        settings = Settings(_env_file=None, case_sensitive_search=False)
        app = Application(settings).app

        with TestClient(app) as client:
            add(client, "1", "Green Tea", "Acme")
            labels = client.get(f"{PRODUCTS_URL}/search/name", params={"q": "green tea"}).json()["labels"]
            names = client.get(f"{PRODUCTS_URL}/search/producer", params={"q": "ACME"}).json()["names"]
            assert labels == ["Green Tea"]
            assert names == ["Green Tea"]

    def test_search_is_case_sensitive_by_default(self, client: TestClient):
        add(client, "1", "Green Tea", "Acme")
        response = client.get(f"{PRODUCTS_URL}/search/name", params={"q": "green tea"})
        assert response.json()["labels"] == []
