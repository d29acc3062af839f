"""
Product endpoints.

Mirrors ``users.py``: ids are parsed by the service helpers so that
non-numeric segments yield "Product not found".
"""

from typing import List

from fastapi import APIRouter, Depends

from mock_database.app.core.db import SeedStore, get_store
from mock_database.app.schemas.product import Product
from mock_database.app.services.lookup import parse_record_id
from mock_database.app.services.product_service import ProductService


router = APIRouter()


@router.get("", response_model=List[Product])
async def list_products(store: SeedStore = Depends(get_store)) -> List[Product]:
    """Return every seeded product in insertion order."""
    return await ProductService.list_products(store)


@router.get("/{product_id}", response_model=Product, responses={404: {"description": "Product not found"}})
async def get_product(product_id: str, store: SeedStore = Depends(get_store)) -> Product:
    """Return a single product by ID, or 404 ``{"error": "Product not found"}``."""
    return await ProductService.get_product(store, parse_record_id(product_id))
