"""Pricing estimate endpoint."""

import logging
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from finance_engine.core.exceptions import FinancingError
from finance_engine.deps import get_financing_engine
from finance_engine.models.schemas.estimate import ErrorResponse, EstimateResponse
from finance_engine.services.financing_engine import FinancingEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/pricing-estimate",
    response_model=EstimateResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
    summary="Estimate lender financing offers",
    description="Rank eligible lenders with APR and monthly payment ranges for a financing request",
)
async def create_pricing_estimate(
    engine: Annotated[FinancingEngine, Depends(get_financing_engine)],
    request: Annotated[Optional[dict[str, Any]], Body()] = None,
) -> Any:
    """
    Estimate financing offers.

    All request fields are optional:
    - state, score, vehiclePrice, downPayment, tradeInValue
    - estTaxesAndFees, term, vehicleYear, mileage, product

    Returns {meta, band, inputs, results} with offers sorted by aprLow.
    Engine errors (bad values, score out of range, bad term) return 400.
    """
    try:
        result = engine.estimate(request or {})
        return EstimateResponse.from_result(result)

    except FinancingError as e:
        logger.warning(f"Estimate rejected: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(e)).model_dump(),
        )
    except Exception as e:
        logger.error(f"Error estimating financing: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to estimate financing",
        )
