"""Health endpoint."""

from fastapi import APIRouter

from crud_admin import __version__
from crud_admin.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
