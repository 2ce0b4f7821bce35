"""Read-only rule catalog endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from finance_engine.deps import get_catalog_repository
from finance_engine.models.schemas.catalog import (
    CatalogSummaryResponse,
    LenderListResponse,
    LenderSummaryResponse,
    ScoreBandResponse,
)
from finance_engine.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=CatalogSummaryResponse,
    summary="Get catalog overview",
    description="Catalog metadata with score band and lender counts",
)
async def get_catalog_summary(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> CatalogSummaryResponse:
    """Return catalog metadata and sizes."""
    catalog = repository.load()
    return CatalogSummaryResponse(
        meta=dict(catalog.meta),
        score_band_count=len(catalog.score_bands),
        lender_count=len(catalog.lenders),
    )


@router.get(
    "/score-bands",
    response_model=list[ScoreBandResponse],
    summary="List score bands",
    description="Score bands in catalog order; the first band containing a score wins",
)
async def list_score_bands(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> list[ScoreBandResponse]:
    """List score bands."""
    return [ScoreBandResponse.from_domain(band) for band in repository.list_score_bands()]


@router.get(
    "/lenders",
    response_model=LenderListResponse,
    summary="List lenders",
    description="Lender rules in catalog order",
)
async def list_lenders(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> LenderListResponse:
    """List lender summaries."""
    items = [LenderSummaryResponse.from_domain(lender) for lender in repository.list_lenders()]
    return LenderListResponse(items=items, total=len(items))


@router.get(
    "/lenders/{lender_id}",
    response_model=LenderSummaryResponse,
    summary="Get lender by ID",
    description="Retrieve one lender rule",
)
async def get_lender(
    lender_id: str,
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> LenderSummaryResponse:
    """
    Retrieve a lender by ID.

    Raises:
        HTTPException: 404 if the lender is not in the catalog
    """
    lender = repository.get_lender(lender_id)
    if lender is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Lender {lender_id} not found",
        )
    return LenderSummaryResponse.from_domain(lender)
