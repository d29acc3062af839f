"""Tests for the product endpoints and service."""

import pytest

from mock_database.app.core.errors import NotFoundError
from mock_database.app.services.product_service import ProductService


def test_list_products(client):
    resp = client.get("/products")
    assert resp.status_code == 200
    products = resp.json()
    assert [p["id"] for p in products] == [1, 2]
    assert products[0] == {"id": 1, "name": "Widget A", "price": 19.99}


def test_get_product_by_id(client):
    resp = client.get("/products/2")
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "name": "Widget B", "price": 29.99}


def test_every_seeded_product_is_retrievable(client, store):
    for product in store.products:
        assert client.get(f"/products/{product.id}").json() == product.model_dump()


def test_get_unknown_product_returns_404(client):
    resp = client.get("/products/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_non_integer_product_id_is_not_found(client):
    resp = client.get("/products/widget")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


async def test_list_products_is_stable(store):
    first = await ProductService.list_products(store)
    second = await ProductService.list_products(store)
    assert first == second
    assert len(first) == 2


async def test_service_get_product_none_id(store):
    with pytest.raises(NotFoundError):
        await ProductService.get_product(store, None)
