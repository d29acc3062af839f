"""
Service layer for users.

Every query is reported through the module logger in SQL form so that
tools watching the logs see something that resembles database
traffic.  The log line is emitted before the lookup result is known,
so misses are logged too.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mock_database.app.core.db import SeedStore
from mock_database.app.core.errors import NotFoundError
from mock_database.app.schemas.user import User
from mock_database.app.services.lookup import find_by_id, format_record_id


logger = logging.getLogger(__name__)


class UserService:
    """Read-only access to the seeded users."""

    @classmethod
    async def list_users(cls, store: SeedStore) -> List[User]:
        """Return all users in insertion order."""
        logger.info("Database query: SELECT * FROM users")
        return list(store.users)

    @classmethod
    async def get_user(cls, store: SeedStore, user_id: Optional[int]) -> User:
        """Return the user with ``user_id``.

        Raises ``NotFoundError`` when no user matches, including when
        ``user_id`` is ``None`` because the path segment did not parse.
        """
        logger.info("Database query: SELECT * FROM users WHERE id = %s", format_record_id(user_id))
        user = find_by_id(store.users, user_id)
        if user is None:
            raise NotFoundError("User")
        return user
