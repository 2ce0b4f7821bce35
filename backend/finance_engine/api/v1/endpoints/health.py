"""Health check endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from finance_engine.core.exceptions import ConfigurationError
from finance_engine.deps import get_catalog_repository
from finance_engine.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(
    repository: Annotated[CatalogRepository, Depends(get_catalog_repository)],
) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running and the rule catalog can be loaded.

    Returns:
        dict: Health status with API and catalog status
    """
    try:
        repository.load()
        catalog_status = "healthy"
    except ConfigurationError as e:
        logger.warning(f"Rule catalog unavailable: {e}")
        catalog_status = f"unhealthy: {e}"

    return {
        "status": "healthy" if catalog_status == "healthy" else "degraded",
        "api": "healthy",
        "catalog": catalog_status,
    }
