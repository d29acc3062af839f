"""
Database information endpoint.

Returns a status record shaped like what a real database server
would report: name, version, active connections and uptime.  The
connection count is random on every call.
"""

import random

from fastapi import APIRouter, Depends

from mock_database.app.core.db import SeedStore, get_random, get_store
from mock_database.app.schemas.system import DatabaseInfo
from mock_database.app.services.system_service import SystemService


router = APIRouter()


@router.get("", response_model=DatabaseInfo)
async def get_info(
    store: SeedStore = Depends(get_store),
    rng: random.Random = Depends(get_random),
) -> DatabaseInfo:
    """Return the database information record; ``connection_count`` changes per call."""
    return await SystemService.get_info(store, rng)
