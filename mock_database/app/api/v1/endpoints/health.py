"""Health check endpoint."""

from fastapi import APIRouter

from mock_database.app.schemas.system import HealthStatus
from mock_database.app.services.system_service import SystemService


router = APIRouter()


@router.get("", response_model=HealthStatus)
async def get_health() -> HealthStatus:
    """Report that the service is up, together with the current UTC time."""
    return await SystemService.get_health()
