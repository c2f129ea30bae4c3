"""API v1 router configuration."""

from fastapi import APIRouter

from lender_screen.api.v1.endpoints import health, screening

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    screening.router,
    prefix="/screening",
    tags=["screening"],
)
