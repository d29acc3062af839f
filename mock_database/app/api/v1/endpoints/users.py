"""
User endpoints.

``user_id`` is declared as a string on purpose: a segment such as
``/users/abc`` must produce the regular "User not found" response
instead of FastAPI's 422 validation error.
"""

from typing import List

from fastapi import APIRouter, Depends

from mock_database.app.core.db import SeedStore, get_store
from mock_database.app.schemas.user import User
from mock_database.app.services.lookup import parse_record_id
from mock_database.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[User])
async def list_users(store: SeedStore = Depends(get_store)) -> List[User]:
    """Return every seeded user in insertion order."""
    return await UserService.list_users(store)


@router.get("/{user_id}", response_model=User, responses={404: {"description": "User not found"}})
async def get_user(user_id: str, store: SeedStore = Depends(get_store)) -> User:
    """Return a single user by ID, or 404 ``{"error": "User not found"}``."""
    return await UserService.get_user(store, parse_record_id(user_id))
