"""Financing estimator: band selection, lender filtering and offer pricing."""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from finance_engine.core.exceptions import InvalidTermError, ValidationError
from finance_engine.models.domain.catalog import Catalog, LenderRule, ScoreBand
from finance_engine.models.domain.pricing import (
    EstimateResult,
    LenderOffer,
    PricingContext,
)
from finance_engine.models.schemas.estimate import FinancingRequest
from finance_engine.services.amortization import CENTS, monthly_payment
from finance_engine.services.rule_engine import RuleEngine, ScoringEngine

logger = logging.getLogger(__name__)

RequestInput = Union[FinancingRequest, Mapping[str, Any], None]


class FinancingEngine:
    """
    Estimates lender offers for a financing request.

    The engine holds no mutable state: the catalog is injected and treated
    as read-only, and every call builds its own context and results, so
    one instance can serve concurrent requests.

    Pipeline:
    1. Apply request defaults
    2. Derive loan amount and LTV
    3. Select the score band
    4. Filter lenders through the rule engine
    5. Price each eligible lender (adjusted APR, APR range, payments, notes)
    6. Sort offers by low APR (stable, ties keep catalog order)
    """

    def __init__(
        self,
        catalog: Catalog,
        rule_engine: Optional[RuleEngine] = None,
        scoring_engine: Optional[ScoringEngine] = None,
    ):
        """
        Initialize the engine.

        Args:
            catalog: Rule catalog to price against
            rule_engine: Eligibility rule engine (default evaluators if omitted)
            scoring_engine: APR and notes helper
        """
        self.catalog = catalog
        self.rule_engine = rule_engine or RuleEngine()
        self.scoring_engine = scoring_engine or ScoringEngine()

    def estimate(self, request: RequestInput = None) -> EstimateResult:
        """
        Estimate ranked lender offers for a request.

        Args:
            request: FinancingRequest, a mapping of request fields (camelCase
                or snake_case), or None for all defaults

        Returns:
            EstimateResult with catalog meta, band, echoed inputs and offers

        Raises:
            ValidationError: If a request field is malformed or amounts are
                too large to price
            InvalidTermError: If the term is not positive
            OutOfRangeError: If the score matches no band
        """
        inputs = self.parse_request(request)
        if inputs.term <= 0:
            raise InvalidTermError(
                f"Loan term must be a positive number of months, got {inputs.term}"
            )

        context = self.build_context(inputs)
        band = self.scoring_engine.select_band(inputs.score, self.catalog.score_bands)

        eligible = self.rule_engine.filter_eligible(self.catalog.lenders, context, band)
        try:
            offers = [self._price_offer(lender, context, band) for lender in eligible]
        except InvalidOperation as e:
            raise ValidationError(
                f"Loan amount {context.loan_amount:.6E} is too large to price"
            ) from e

        # list.sort is stable, so equal APRs keep catalog order
        offers.sort(key=lambda offer: offer.apr_low)

        logger.info(
            "Estimate completed",
            extra={
                "band": band.id,
                "state": context.state,
                "product": context.product,
                "term": context.term,
                "lenders_evaluated": len(self.catalog.lenders),
                "offers": len(offers),
            },
        )

        return EstimateResult(
            meta=self.catalog.meta,
            band=band,
            inputs=inputs,
            results=tuple(offers),
        )

    @staticmethod
    def parse_request(request: RequestInput) -> FinancingRequest:
        """
        Coerce caller input into a FinancingRequest with defaults applied.

        Raises:
            ValidationError: If the input is not an object or has bad values
        """
        if isinstance(request, FinancingRequest):
            return request
        if request is None:
            return FinancingRequest()
        if not isinstance(request, Mapping):
            raise ValidationError(
                f"Financing request must be an object, got {type(request).__name__}"
            )

        try:
            return FinancingRequest.model_validate(dict(request))
        except PydanticValidationError as e:
            raise ValidationError(_describe_validation_error(e)) from e

    @staticmethod
    def build_context(inputs: FinancingRequest) -> PricingContext:
        """
        Derive the pricing context for a request.

        loan_amount = price - down payment - trade-in + taxes/fees, floored at 0
        ltv = loan_amount / max(price, 1)
        """
        loan_amount = max(
            inputs.vehicle_price
            - inputs.down_payment
            - inputs.trade_in_value
            + inputs.est_taxes_and_fees,
            Decimal("0"),
        )
        ltv = loan_amount / max(inputs.vehicle_price, Decimal("1"))

        return PricingContext(
            state=inputs.state,
            term=inputs.term,
            used=inputs.is_used,
            ltv=ltv,
            vehicle_year=inputs.vehicle_year,
            mileage=inputs.mileage,
            product=inputs.product,
            loan_amount=loan_amount,
        )

    def _price_offer(
        self,
        lender: LenderRule,
        context: PricingContext,
        band: ScoreBand,
    ) -> LenderOffer:
        """Build the offer for an eligible lender."""
        base_apr = lender.base_apr_for(band.id)
        apr, fired = self.scoring_engine.adjusted_apr(base_apr, context, lender.adjusters)
        apr_low, apr_high = self.scoring_engine.apr_range(apr)

        logger.debug(
            "Lender priced",
            extra={
                "lender_id": lender.id,
                "base_apr": str(base_apr),
                "adjusted_apr": str(apr),
                "adjusters_fired": len(fired),
            },
        )

        return LenderOffer(
            lender_id=lender.id,
            lender_name=lender.name,
            apr_low=self.scoring_engine.round_apr(apr_low),
            apr_high=self.scoring_engine.round_apr(apr_high),
            payment_low=monthly_payment(apr_low, context.loan_amount, context.term),
            payment_high=monthly_payment(apr_high, context.loan_amount, context.term),
            term=context.term,
            loan_amount=context.loan_amount.quantize(CENTS, rounding=ROUND_HALF_UP),
            notes=tuple(self.scoring_engine.build_notes(context)),
            caps=lender.caps,
        )


def _describe_validation_error(error: PydanticValidationError) -> str:
    messages: List[str] = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "request"
        messages.append(f"{location}: {detail['msg']}")
    return "Invalid financing request: " + "; ".join(messages)


def estimate(request: RequestInput, catalog: Catalog) -> EstimateResult:
    """Convenience wrapper: estimate offers for one request against a catalog."""
    return FinancingEngine(catalog).estimate(request)
