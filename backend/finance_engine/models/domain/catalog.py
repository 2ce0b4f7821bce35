"""Rule catalog domain models: score bands, lender rules and adjusters.

Catalog objects are immutable once loaded. Collections are tuples,
frozensets or read-only mappings so a single catalog instance can be
shared across concurrent estimate calls.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from finance_engine.core.enums import Comparator, ContextField

PredicateValue = Union[bool, int, Decimal, str]


@dataclass(frozen=True)
class ScoreBand:
    """Closed credit-score interval mapped to a lender pricing tier."""

    id: str
    min_score: Decimal
    max_score: Decimal

    def contains(self, score: Decimal) -> bool:
        return self.min_score <= score <= self.max_score

    def overlaps(self, other: "ScoreBand") -> bool:
        return self.min_score <= other.max_score and other.min_score <= self.max_score


@dataclass(frozen=True)
class LenderCaps:
    """
    Lender-level limits. None means the limit is unbounded.

    Attributes:
        max_ltv: Highest loan-to-value ratio accepted
        min_year: Oldest model year accepted
        max_miles: Highest odometer reading accepted
    """

    max_ltv: Optional[Decimal] = None
    min_year: Optional[int] = None
    max_miles: Optional[int] = None


@dataclass(frozen=True)
class AdjusterPredicate:
    """Single typed condition over the pricing context, e.g. term >= 61."""

    field: ContextField
    comparator: Comparator
    value: PredicateValue


@dataclass(frozen=True)
class Adjuster:
    """
    Conditional APR delta.

    The delta applies when every predicate holds; an adjuster with no
    predicates always applies.
    """

    predicates: tuple[AdjusterPredicate, ...] = ()
    apr_add: Decimal = Decimal("0")


@dataclass(frozen=True)
class LenderRule:
    """One financing partner's offer policy."""

    id: str
    name: str
    states: frozenset[str]
    products: frozenset[str]
    terms: frozenset[int]
    base_apr_by_band: Mapping[str, Decimal]
    caps: Optional[LenderCaps] = None
    adjusters: tuple[Adjuster, ...] = ()

    def base_apr_for(self, band_id: str) -> Optional[Decimal]:
        """Base APR for a band, or None if the lender does not serve it."""
        base = self.base_apr_by_band.get(band_id)
        if base is None or base <= 0:
            return None
        return base


@dataclass(frozen=True)
class Catalog:
    """Complete rule catalog: metadata, score bands and lenders."""

    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    score_bands: tuple[ScoreBand, ...] = ()
    lenders: tuple[LenderRule, ...] = ()

    def get_lender(self, lender_id: str) -> Optional[LenderRule]:
        for lender in self.lenders:
            if lender.id == lender_id:
                return lender
        return None
