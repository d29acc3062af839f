"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under their path
prefixes.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import health, info, products, users


router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(info.router, prefix="/info", tags=["info"])

# Printed in the startup banner.  Keep in sync with the routers above.
ENDPOINTS = (
    ("GET /health", "Health check"),
    ("GET /users", "Get all users"),
    ("GET /users/:id", "Get user by ID"),
    ("GET /products", "Get all products"),
    ("GET /products/:id", "Get product by ID"),
    ("GET /info", "Database info"),
)
