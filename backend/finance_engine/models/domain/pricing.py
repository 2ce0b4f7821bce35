"""Request-scoped pricing models produced by the estimator."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from finance_engine.core.enums import ContextField
from finance_engine.models.domain.catalog import LenderCaps, ScoreBand

if TYPE_CHECKING:
    from finance_engine.models.schemas.estimate import FinancingRequest


@dataclass(frozen=True)
class PricingContext:
    """
    Values derived from a financing request that lender rules are tested against.

    Attributes:
        state: Jurisdiction code of the buyer
        term: Loan term in months
        used: Whether the product is a used-vehicle loan
        ltv: Loan amount divided by vehicle price
        vehicle_year: Model year of the vehicle
        mileage: Odometer reading
        product: Requested product identifier
        loan_amount: Amount financed (never negative)
    """

    state: str
    term: int
    used: bool
    ltv: Decimal
    vehicle_year: int
    mileage: Decimal
    product: str
    loan_amount: Decimal

    def value_of(self, context_field: ContextField) -> Union[bool, int, Decimal, str]:
        if context_field == ContextField.USED:
            return self.used
        if context_field == ContextField.TERM:
            return self.term
        if context_field == ContextField.LTV:
            return self.ltv
        if context_field == ContextField.STATE:
            return self.state
        raise ValueError(f"Unsupported context field: {context_field}")


@dataclass(frozen=True)
class LenderOffer:
    """Priced offer from one eligible lender."""

    lender_id: str
    lender_name: str
    apr_low: Decimal
    apr_high: Decimal
    payment_low: Decimal
    payment_high: Decimal
    term: int
    loan_amount: Decimal
    notes: tuple[str, ...] = ()
    caps: Optional[LenderCaps] = None


@dataclass(frozen=True)
class EstimateResult:
    """Full estimator output: catalog meta, matched band, echoed inputs and offers."""

    meta: Mapping[str, Any]
    band: ScoreBand
    inputs: "FinancingRequest"
    results: tuple[LenderOffer, ...] = field(default_factory=tuple)
