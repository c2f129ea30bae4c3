"""Dependency injection for FastAPI endpoints."""

from typing import Annotated

from fastapi import Depends

from lender_screen.config import settings
from lender_screen.models.domain.context import ScreeningContext
from lender_screen.services.screening_service import ScreeningService


def get_screening_context() -> ScreeningContext:
    """Build a fresh screening context from settings for each request."""
    return ScreeningContext(
        debug=settings.DEBUG_MODE,
        delimiter=settings.CSV_DELIMITER,
    )


def get_screening_service(
    context: Annotated[ScreeningContext, Depends(get_screening_context)],
) -> ScreeningService:
    """Get a screening service bound to the request's context."""
    return ScreeningService(context)
