"""Service layer for products."""

from __future__ import annotations

import logging
from typing import List, Optional

from mock_database.app.core.db import SeedStore
from mock_database.app.core.errors import NotFoundError
from mock_database.app.schemas.product import Product
from mock_database.app.services.lookup import find_by_id, format_record_id


logger = logging.getLogger(__name__)


class ProductService:
    """Read-only access to the seeded products."""

    @classmethod
    async def list_products(cls, store: SeedStore) -> List[Product]:
        """Return all products in insertion order."""
        logger.info("Database query: SELECT * FROM products")
        return list(store.products)

    @classmethod
    async def get_product(cls, store: SeedStore, product_id: Optional[int]) -> Product:
        """Return the product with ``product_id`` or raise ``NotFoundError``."""
        logger.info("Database query: SELECT * FROM products WHERE id = %s", format_record_id(product_id))
        product = find_by_id(store.products, product_id)
        if product is None:
            raise NotFoundError("Product")
        return product
