"""
Health Routes - System health and status endpoints.
"""

from fastapi import APIRouter, Depends

from portfolio.config import Settings
from portfolio.domains.clock import utc_timestamp
from portfolio.interfaces.api.deps import get_app_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "service": settings.service_name,
    }
