"""Pydantic schemas for API validation and serialization."""

from finance_engine.models.schemas.catalog import (
    AdjusterConfig,
    AdjusterWhenConfig,
    CatalogConfig,
    CatalogSummaryResponse,
    LenderCapsConfig,
    LenderCapsResponse,
    LenderListResponse,
    LenderRuleConfig,
    LenderSummaryResponse,
    ScoreBandConfig,
    ScoreBandResponse,
)
from finance_engine.models.schemas.estimate import (
    ErrorResponse,
    EstimateResponse,
    FinancingRequest,
    LenderOfferResponse,
)

__all__ = [
    # Catalog file schemas
    "CatalogConfig",
    "ScoreBandConfig",
    "LenderRuleConfig",
    "LenderCapsConfig",
    "AdjusterConfig",
    "AdjusterWhenConfig",
    # Catalog response schemas
    "CatalogSummaryResponse",
    "ScoreBandResponse",
    "LenderCapsResponse",
    "LenderSummaryResponse",
    "LenderListResponse",
    # Estimate schemas
    "FinancingRequest",
    "EstimateResponse",
    "LenderOfferResponse",
    "ErrorResponse",
]
