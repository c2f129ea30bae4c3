"""Health check endpoint."""

from fastapi import APIRouter

from lender_screen.config import settings
from lender_screen.models.schemas.screening import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        HealthResponse with API status and environment
    """
    return HealthResponse(
        status="healthy",
        api="healthy",
        details={"environment": settings.ENVIRONMENT},
    )
