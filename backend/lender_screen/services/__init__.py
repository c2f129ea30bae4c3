"""Service layer for business logic."""

from lender_screen.services.result_presenter import ResultPresenter
from lender_screen.services.screening_service import ScreeningService

__all__ = ["ResultPresenter", "ScreeningService"]
