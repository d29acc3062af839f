"""
Service layer for the health and metadata endpoints.

The health check always succeeds; it does not consult the seed data.
The info record mimics what a real database would report about
itself.  ``connection_count`` is drawn from the random source passed
in so that tests can seed it.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Optional

from mock_database.app.core.db import SeedStore
from mock_database.app.schemas.system import DatabaseInfo, HealthStatus


DATABASE_NAME = "mock_database"
DATABASE_VERSION = "1.0.0"


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: current time) as ISO-8601 UTC with a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SystemService:
    """Health and info reporting."""

    @classmethod
    async def get_health(cls) -> HealthStatus:
        """Return a healthy status stamped with the current UTC time."""
        return HealthStatus(status="healthy", timestamp=utc_timestamp())

    @classmethod
    async def get_info(cls, store: SeedStore, rng: Optional[random.Random] = None) -> DatabaseInfo:
        """Build the info record.

        ``uptime`` is measured from the creation of ``store``.  Without
        ``rng`` a fresh unseeded generator draws ``connection_count``.
        """
        rng = rng or random.Random()
        return DatabaseInfo(
            database=DATABASE_NAME,
            version=DATABASE_VERSION,
            connection_count=rng.randint(1, 10),
            uptime=store.uptime(),
        )
