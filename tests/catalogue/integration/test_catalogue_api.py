"""Integration tests for the Catalogue API endpoints."""

import pytest
from catalogue.api import product_router
from catalogue.product.product import Product
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    register_exception_handlers(app)
    return TestClient(app)


def _create(client, **overrides):
    body = {
        "name": "Classic Black T-Shirt",
        "slug": "classic-black-t-shirt",
        "category": "T-Shirts",
        "tags": ["new-arrival", "todays-deal"],
        "images": ["/images/p11-1.jpg"],
        "price": 21.99,
        "isPublished": True,
    }
    body.update(overrides)
    response = client.post("/products", json=body)
    assert response.status_code == 201
    return response.json()["productId"]


class TestCreateProductEndpoint:
    def test_create_product(self, client):
        product_id = _create(client, brand="Acme", countInStock=7)
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Classic Black T-Shirt"
        assert product.brand == "Acme"
        assert product.count_in_stock == 7

    def test_duplicate_slug_returns_400(self, client):
        _create(client)
        response = client.post("/products", json={"name": "Other", "slug": "classic-black-t-shirt", "category": "X"})
        assert response.status_code == 400

    def test_invalid_slug_returns_400(self, client):
        response = client.post("/products", json={"name": "Bad", "slug": "Bad Slug", "category": "X"})
        assert response.status_code == 400

    def test_missing_fields_returns_422(self, client):
        response = client.post("/products", json={"name": "No slug"})
        assert response.status_code == 422


class TestStorefrontReads:
    def test_categories(self, client):
        _create(client, slug="shirt-1", category="T-Shirts")
        _create(client, slug="jeans-1", category="Jeans")
        response = client.get("/products/categories")
        assert response.status_code == 200
        assert response.json() == ["Jeans", "T-Shirts"]

    def test_cards(self, client):
        _create(client, slug="shirt-1", name="Shirt")
        response = client.get("/products/cards", params={"tag": "new-arrival"})
        assert response.status_code == 200
        assert response.json() == [{"name": "Shirt", "href": "/product/shirt-1", "image": "/images/p11-1.jpg"}]

    def test_products_by_tag(self, client):
        _create(client, slug="shirt-1")
        response = client.get("/products/tags/todays-deal")
        assert response.status_code == 200
        data = response.json()
        assert data[0]["slug"] == "shirt-1"
        assert data[0]["isPublished"] is True
        assert data[0]["ratingDistribution"][4] == {"rating": 5, "count": 0}

    def test_product_by_slug(self, client):
        product_id = _create(client, slug="shirt-1")
        response = client.get("/products/slug/shirt-1")
        assert response.status_code == 200
        assert response.json()["id"] == product_id

    def test_unknown_slug_returns_404(self, client):
        response = client.get("/products/slug/nothing-here")
        assert response.status_code == 404

    def test_related(self, client):
        current = _create(client, slug="shirt-1")
        _create(client, slug="shirt-2")
        response = client.get(
            "/products/related",
            params={"category": "T-Shirts", "product_id": current},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["totalPages"] == 1
        assert [product["slug"] for product in body["data"]] == ["shirt-2"]

    def test_related_rejects_page_zero(self, client):
        response = client.get("/products/related", params={"category": "T-Shirts", "product_id": "x", "page": 0})
        assert response.status_code == 422


class TestAdminWrites:
    def test_publish_and_unpublish(self, client):
        product_id = _create(client, isPublished=False)
        assert client.put(f"/products/{product_id}/publish").status_code == 200
        assert client.get("/products/slug/classic-black-t-shirt").status_code == 200

        assert client.put(f"/products/{product_id}/unpublish").status_code == 200
        assert client.get("/products/slug/classic-black-t-shirt").status_code == 404

    def test_publish_twice_returns_400(self, client):
        product_id = _create(client)
        assert client.put(f"/products/{product_id}/publish").status_code == 400

    def test_record_sale(self, client):
        product_id = _create(client)
        response = client.post(f"/products/{product_id}/sales", json={"quantity": 3})
        assert response.status_code == 201
        assert current_domain.repository_for(Product).get(product_id).num_sales == 3

    def test_record_sale_for_unknown_product_returns_404(self, client):
        response = client.post("/products/missing/sales", json={"quantity": 1})
        assert response.status_code == 404
