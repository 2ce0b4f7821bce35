"""Score banding, APR adjustment and offer notes."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Sequence, Tuple

from finance_engine.core.exceptions import OutOfRangeError
from finance_engine.models.domain.catalog import Adjuster, ScoreBand
from finance_engine.models.domain.pricing import PricingContext
from finance_engine.services.rule_engine.predicates import all_predicates_hold

# Presentation band around the point APR, not a confidence interval
APR_SPREAD = Decimal("0.005")
APR_PLACES = Decimal("0.0001")

LONG_TERM_MONTHS = 61
HIGH_LTV = Decimal("1.0")

USED_VEHICLE_NOTE = "Used vehicle add-on included"
LONG_TERM_NOTE = "Longer-term add-on included"
HIGH_LTV_NOTE = "High LTV add-on included"


class ScoringEngine:
    """
    Pricing helpers for the estimator.

    Provides score band selection, cumulative APR adjustment, the
    low/high APR range and the advisory notes attached to each offer.
    """

    @staticmethod
    def select_band(score: Decimal, bands: Sequence[ScoreBand]) -> ScoreBand:
        """
        Pick the first band whose closed interval contains the score.

        Bands are checked in catalog order, so with overlapping bands the
        earlier one wins.

        Raises:
            OutOfRangeError: If no band contains the score
        """
        for band in bands:
            if band.contains(score):
                return band
        raise OutOfRangeError("Score out of supported range")

    @staticmethod
    def adjusted_apr(
        base_apr: Decimal,
        context: PricingContext,
        adjusters: Iterable[Adjuster],
    ) -> Tuple[Decimal, List[Adjuster]]:
        """
        Apply every matching adjuster to the base APR.

        Deltas are summed in list order. The matched adjusters are returned
        alongside the APR for tracing.

        Returns:
            (adjusted APR, adjusters that fired)
        """
        apr = base_apr
        fired: List[Adjuster] = []

        for adjuster in adjusters:
            if all_predicates_hold(adjuster.predicates, context):
                apr += adjuster.apr_add
                fired.append(adjuster)

        return apr, fired

    @staticmethod
    def apr_range(apr: Decimal) -> Tuple[Decimal, Decimal]:
        """Unrounded (low, high) APR around the point estimate; low is floored at zero."""
        low = max(apr - APR_SPREAD, Decimal("0"))
        high = apr + APR_SPREAD
        return low, high

    @staticmethod
    def round_apr(apr: Decimal) -> Decimal:
        return apr.quantize(APR_PLACES, rounding=ROUND_HALF_UP)

    @staticmethod
    def build_notes(context: PricingContext) -> List[str]:
        """
        Advisory notes derived from the pricing context.

        Notes follow the request, not the lender: a lender without a used
        or long-term adjuster still gets the matching note.
        """
        notes: List[str] = []
        if context.used:
            notes.append(USED_VEHICLE_NOTE)
        if context.term >= LONG_TERM_MONTHS:
            notes.append(LONG_TERM_NOTE)
        if context.ltv > HIGH_LTV:
            notes.append(HIGH_LTV_NOTE)
        return notes
