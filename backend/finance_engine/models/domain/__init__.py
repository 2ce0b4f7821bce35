"""Domain models for the financing engine."""

from finance_engine.models.domain.catalog import (
    Adjuster,
    AdjusterPredicate,
    Catalog,
    LenderCaps,
    LenderRule,
    ScoreBand,
)
from finance_engine.models.domain.pricing import (
    EstimateResult,
    LenderOffer,
    PricingContext,
)

__all__ = [
    "Adjuster",
    "AdjusterPredicate",
    "Catalog",
    "LenderCaps",
    "LenderRule",
    "ScoreBand",
    "EstimateResult",
    "LenderOffer",
    "PricingContext",
]
