"""
In-memory seed data for the mock database.

There is no real database behind this service.  The ``SeedStore``
holds two immutable collections (users and products) together with
the moment the store was created, which ``/info`` reports as uptime.
A store is built once by ``init_store`` when the application is
created and is then handed to the request handlers through the
``get_store`` dependency.  Because nothing ever mutates it, concurrent
requests may read it without any locking.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from fastapi import Request

from ..schemas.product import Product
from ..schemas.user import User


DEFAULT_USERS: Tuple[User, ...] = (
    User(id=1, name="John Doe", email="john@example.com"),
    User(id=2, name="Jane Smith", email="jane@example.com"),
)

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Widget A", price=19.99),
    Product(id=2, name="Widget B", price=29.99),
)


def _check_unique_ids(collection: str, records: Iterable) -> None:
    seen = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate id {record.id} in {collection}")
        seen.add(record.id)


@dataclass(frozen=True)
class SeedStore:
    """Immutable container for the seed collections.

    Attributes:
        users: User records in insertion order.
        products: Product records in insertion order.
        started_at: ``time.monotonic()`` value captured at construction.
    """

    users: Tuple[User, ...]
    products: Tuple[Product, ...]
    started_at: float = field(default_factory=time.monotonic)

    def __post_init__(self) -> None:
        # Accept any iterable but always store tuples.
        object.__setattr__(self, "users", tuple(self.users))
        object.__setattr__(self, "products", tuple(self.products))
        _check_unique_ids("users", self.users)
        _check_unique_ids("products", self.products)

    def uptime(self) -> float:
        """Return the number of seconds since the store was created."""
        return time.monotonic() - self.started_at


def init_store() -> SeedStore:
    """Build the default seed store."""
    return SeedStore(users=DEFAULT_USERS, products=DEFAULT_PRODUCTS)


def get_store(request: Request) -> SeedStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store


def get_random(request: Request) -> random.Random:
    """FastAPI dependency returning the random source used by ``/info``."""
    return request.app.state.rng
