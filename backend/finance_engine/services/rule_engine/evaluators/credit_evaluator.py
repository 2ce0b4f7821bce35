"""Credit evaluator checking that a lender prices the selected score band."""

from finance_engine.core.enums import EligibilityCheck
from finance_engine.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class CreditEvaluator(RuleEvaluator):
    """
    Evaluator for credit-band checks.

    Handles:
    - BAND_PRICING: the lender must carry a positive base APR for the band
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        if context.check == EligibilityCheck.BAND_PRICING:
            return self._evaluate_band_pricing(context)
        raise self._unsupported(context)

    def _evaluate_band_pricing(self, context: EvaluationContext) -> EvaluationResult:
        band_id = context.band.id
        base_apr = context.lender.base_apr_for(band_id)

        return self._result(
            context,
            base_apr is not None,
            f"Score band '{band_id}' is not served",
            band=band_id,
            base_apr=None if base_apr is None else str(base_apr),
        )
