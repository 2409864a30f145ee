"""Health check endpoints."""
from fastapi import APIRouter, Depends
import logging

from ..core.config import settings
from ..core.database import health_check_db
from ..core.dependencies import get_measurements_hub
from ..services.hub import MeasurementsHub

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["Health"])

@router.get("/")
async def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": "BackEye API",
        "version": settings.app_version
    }

@router.get("/db-health")
async def database_health():
    """Database health check"""
    db_healthy = await health_check_db()
    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "database": "healthy" if db_healthy else "unhealthy"
    }

@router.get("/hub-health")
async def hub_health(hub: MeasurementsHub = Depends(get_measurements_hub)):
    """Measurements hub status"""
    return {
        "status": "healthy",
        "connected_dashboards": hub.connection_count()
    }
