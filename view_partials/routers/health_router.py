"""Health endpoints."""

from fastapi import APIRouter, Depends

from view_partials import __version__
from view_partials.config import Settings
from view_partials.dependencies import get_app_settings
from view_partials.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__, templates_dir=str(settings.templates_dir))
