"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check returns status and counts."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"] == {"categories": 0, "products": 0}

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestCategoryEndpoints:
    """Tests for category endpoints."""

    def test_list_empty(self, client: TestClient):
        """Test empty category list."""
        response = client.get("/categories")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_seeded(self, seeded_client: TestClient):
        """Test demo categories are present on a seeded app."""
        response = seeded_client.get("/categories")
        assert response.json() == ["Cevi", "Ventili", "Pipe", "Armature"]

    def test_create(self, client: TestClient):
        """Test creating a category."""
        response = client.post("/categories", json={"name": "Ventili"})
        assert response.status_code == 201
        assert response.json() == {"name": "Ventili"}
        assert client.get("/categories").json() == ["Ventili"]

    def test_create_missing_name(self, client: TestClient):
        """Test creating a category without a name."""
        response = client.post("/categories", json={})
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert data["error"]["message"]

    def test_create_without_body(self, client: TestClient):
        """Test creating a category with no request body."""
        response = client.post("/categories")
        assert response.status_code == 400

    def test_create_duplicate(self, client: TestClient):
        """Test duplicate category is rejected and list is unchanged."""
        client.post("/categories", json={"name": "Pipe"})
        response = client.post("/categories", json={"name": "Pipe"})
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CATEGORY_EXISTS"
        assert client.get("/categories").json() == ["Pipe"]

    def test_delete_reassigns_products(self, client: TestClient, product_payload: dict):
        """Test deleting a category moves its products to the fallback."""
        client.post("/categories", json={"name": "Ventili"})
        ids = [
            client.post("/products", json=product_payload).json()["id"]
            for _ in range(2)
        ]

        response = client.delete("/categories/Ventili")
        assert response.status_code == 204
        assert response.content == b""

        for product_id in ids:
            assert client.get(f"/products/{product_id}").json()["category"] == "Drugo"
        categories = client.get("/categories").json()
        assert "Drugo" in categories
        assert "Ventili" not in categories

    def test_delete_unknown_is_idempotent(self, client: TestClient):
        """Test deleting an unknown category still succeeds."""
        response = client.delete("/categories/Neznano")
        assert response.status_code == 204
        assert client.get("/categories").json() == ["Drugo"]

    def test_delete_url_encoded_name(self, client: TestClient):
        """Test category names with spaces survive URL encoding."""
        client.post("/categories", json={"name": "Kopalniška oprema"})
        response = client.delete("/categories/Kopalni%C5%A1ka%20oprema")
        assert response.status_code == 204
        assert client.get("/categories").json() == ["Drugo"]


class TestProductEndpoints:
    """Tests for product endpoints."""

    def test_create(self, client: TestClient, product_payload: dict):
        """Test creating a product returns it with a new id."""
        response = client.post("/products", json=product_payload)
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        for key, value in product_payload.items():
            assert data[key] == value

    def test_create_ids_are_distinct(self, client: TestClient, product_payload: dict):
        """Test every created product gets a distinct id."""
        ids = {client.post("/products", json=product_payload).json()["id"] for _ in range(5)}
        assert len(ids) == 5

    def test_create_without_image(self, client: TestClient, product_payload: dict):
        """Test image defaults to an empty string."""
        del product_payload["image"]
        response = client.post("/products", json=product_payload)
        assert response.status_code == 201
        assert response.json()["image"] == ""

    def test_create_string_price(self, client: TestClient, product_payload: dict):
        """Test numeric string prices are coerced."""
        product_payload["price"] = "3.20"
        response = client.post("/products", json=product_payload)
        assert response.status_code == 201
        assert response.json()["price"] == 3.2

    @pytest.mark.parametrize("missing", ["name", "description", "category", "price"])
    def test_create_missing_field(self, client: TestClient, product_payload: dict, missing: str):
        """Test a missing required field returns 400 and stores nothing."""
        del product_payload[missing]
        response = client.post("/products", json=product_payload)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert client.get("/products").json() == []

    def test_create_invalid_price(self, client: TestClient, product_payload: dict):
        """Test a non-numeric price returns 400."""
        product_payload["price"] = "poceni"
        response = client.post("/products", json=product_payload)
        assert response.status_code == 400
        assert client.get("/products").json() == []

    def test_create_negative_price(self, client: TestClient, product_payload: dict):
        """Test a negative price returns 400."""
        product_payload["price"] = -2
        response = client.post("/products", json=product_payload)
        assert response.status_code == 400

    def test_create_malformed_json(self, client: TestClient):
        """Test an unparseable body returns 400."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    def test_list_newest_first(self, client: TestClient, product_payload: dict):
        """Test products are listed in reverse creation order."""
        first = client.post("/products", json={**product_payload, "name": "Prvi"}).json()
        second = client.post("/products", json={**product_payload, "name": "Drugi"}).json()
        listed = client.get("/products").json()
        assert [p["id"] for p in listed] == [second["id"], first["id"]]

    def test_list_filters(self, client: TestClient, product_payload: dict):
        """Test category and search filters on the listing."""
        client.post("/products", json={**product_payload, "category": "Cevi", "name": "Bakrena cev"})
        valve = client.post("/products", json=product_payload).json()

        by_category = client.get("/products", params={"category": "Ventili"}).json()
        assert [p["id"] for p in by_category] == [valve["id"]]

        by_query = client.get("/products", params={"q": "BAKRENA"}).json()
        assert [p["name"] for p in by_query] == ["Bakrena cev"]

    def test_list_seeded(self, seeded_client: TestClient):
        """Test the demo product is listed on a seeded app."""
        products = seeded_client.get("/products").json()
        assert len(products) == 1
        assert products[0]["name"] == "PVC Cev 20mm"
        assert products[0]["price"] == 2.99

    def test_get(self, client: TestClient, product_payload: dict):
        """Test fetching a product by id."""
        created = client.post("/products", json=product_payload).json()
        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_not_found(self, client: TestClient):
        """Test fetching an unknown product."""
        response = client.get("/products/nope1234")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    def test_update_price_only(self, client: TestClient, product_payload: dict):
        """Test a price-only patch leaves other fields unchanged."""
        product_payload["image"] = "http://cdn.example.test/uploads/1.png"
        created = client.post("/products", json=product_payload).json()

        response = client.put(f"/products/{created['id']}", json={"price": 5.5})
        assert response.status_code == 200
        updated = response.json()
        assert updated == {**created, "price": 5.5}

    def test_update_ignores_id(self, client: TestClient, product_payload: dict):
        """Test the id cannot be changed through an update."""
        created = client.post("/products", json=product_payload).json()
        response = client.put(
            f"/products/{created['id']}",
            json={"id": "hijacked", "name": "Novo ime"}
        )
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert response.json()["name"] == "Novo ime"

    def test_update_empty_body(self, client: TestClient, product_payload: dict):
        """Test an update without fields returns the product unchanged."""
        created = client.post("/products", json=product_payload).json()
        response = client.put(f"/products/{created['id']}", json={})
        assert response.status_code == 200
        assert response.json() == created

    def test_update_not_found(self, client: TestClient):
        """Test updating an unknown product."""
        response = client.put("/products/nope1234", json={"price": 1})
        assert response.status_code == 404

    def test_delete(self, client: TestClient, product_payload: dict):
        """Test deleting a product."""
        created = client.post("/products", json=product_payload).json()
        response = client.delete(f"/products/{created['id']}")
        assert response.status_code == 204
        assert client.get(f"/products/{created['id']}").status_code == 404
        assert client.get("/products").json() == []

    def test_delete_not_found(self, client: TestClient, product_payload: dict):
        """Test deleting an unknown product leaves the collection intact."""
        created = client.post("/products", json=product_payload).json()
        response = client.delete("/products/nope1234")
        assert response.status_code == 404
        assert [p["id"] for p in client.get("/products").json()] == [created["id"]]


class TestStrictCategories:
    """Tests for strict category references."""

    def test_unknown_category_rejected(self, settings, product_payload: dict):
        """Test product writes with an unknown category fail in strict mode."""
        from catalog_api.main import Application

        strict = settings.model_copy(update={"enforce_category_reference": True})
        with TestClient(Application(strict).app) as client:
            response = client.post("/products", json=product_payload)
            assert response.status_code == 400

            client.post("/categories", json={"name": "Ventili"})
            response = client.post("/products", json=product_payload)
            assert response.status_code == 201
