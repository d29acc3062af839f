"""
Schemas for the health and metadata endpoints.

Neither endpoint touches the seed collections; they report on the
service process itself.
"""

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Response of ``GET /health``."""

    status: str = Field("healthy", examples=["healthy"])
    timestamp: str = Field(..., description="Current UTC time in ISO-8601 format")


class DatabaseInfo(BaseModel):
    """Response of ``GET /info``.

    ``connection_count`` is random on every call; it only exists so
    that the payload looks like a real database status report.
    """

    database: str = "mock_database"
    version: str = "1.0.0"
    connection_count: int = Field(..., ge=1, le=10)
    uptime: float = Field(..., ge=0, description="Seconds since the process started")
