"""Screening endpoints for classifying lenders against a merchant request."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from lender_screen.config import settings
from lender_screen.core.exceptions import FormatError
from lender_screen.deps import get_screening_service
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.models.schemas.screening import (
    MerchantCriteriaRequest,
    ScreeningRequest,
    ScreeningResponse,
)
from lender_screen.services.screening_service import ScreeningService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_BLANK = r".*\S.*"


def _run_screening(
    service: ScreeningService,
    table_text: str,
    criteria: MerchantCriteria,
) -> ScreeningResponse:
    """Run the service and translate domain errors into HTTP errors."""
    try:
        result = service.screen(table_text, criteria)
    except FormatError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"CSV parsing failed: {e}",
        )
    except Exception as e:
        logger.error(f"Screening failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Processing error: {str(e)}",
        )

    return ScreeningResponse.from_result(
        result,
        include_diagnostics=service.context.debug,
    )


@router.post(
    "/evaluate",
    response_model=ScreeningResponse,
    summary="Screen lenders from CSV text",
    description="Classify every lender in the supplied table against the merchant criteria",
)
async def evaluate(
    request: ScreeningRequest,
    service: Annotated[ScreeningService, Depends(get_screening_service)],
) -> ScreeningResponse:
    """
    Screen a lender table supplied inline.

    Each lender ends up qualified (grouped by tier), non-qualified with the
    first blocking rule, or auto-dropped as an unusable row.
    """
    return _run_screening(service, request.csv_text, request.criteria.to_domain())


@router.post(
    "/upload",
    response_model=ScreeningResponse,
    summary="Screen lenders from an uploaded CSV file",
)
async def upload_and_evaluate(
    file: Annotated[UploadFile, File(description="Lender CSV file")],
    service: Annotated[ScreeningService, Depends(get_screening_service)],
    requested_position: Annotated[int, Form(ge=1, le=10)],
    tib: Annotated[int, Form(ge=0)],
    monthly_revenue: Annotated[int, Form(ge=0)],
    fico: Annotated[int, Form(ge=300, le=850)],
    state: Annotated[str, Form(pattern=NOT_BLANK, max_length=100)],
    industry: Annotated[str, Form(pattern=NOT_BLANK, max_length=255)],
    is_sole_prop: Annotated[bool, Form()] = False,
) -> ScreeningResponse:
    """
    Upload a lender CSV and screen it.

    Raises:
        HTTPException: If the file is not a CSV, too large, or not UTF-8
    """
    criteria = MerchantCriteriaRequest(
        requested_position=requested_position,
        tib=tib,
        monthly_revenue=monthly_revenue,
        fico=fico,
        state=state,
        industry=industry,
        is_sole_prop=is_sole_prop,
    )

    # Validate file type
    if not file.filename or not file.filename.lower().endswith(".csv"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please select a CSV file",
        )

    # Validate file size
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size must be less than {settings.MAX_UPLOAD_BYTES} bytes",
        )

    try:
        table_text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error reading file: CSV must be UTF-8 encoded",
        )

    logger.info(f"Screening uploaded file: {file.filename} ({len(content)} bytes)")
    return _run_screening(service, table_text, criteria.to_domain())
