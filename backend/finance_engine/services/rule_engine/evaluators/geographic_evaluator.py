"""Geographic eligibility evaluator."""

from finance_engine.core.enums import EligibilityCheck
from finance_engine.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class GeographicEvaluator(RuleEvaluator):
    """
    Evaluator for jurisdiction checks.

    Handles:
    - STATE: buyer state must be one of the lender's states
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        if context.check == EligibilityCheck.STATE:
            return self._evaluate_state(context)
        raise self._unsupported(context)

    def _evaluate_state(self, context: EvaluationContext) -> EvaluationResult:
        state = context.pricing.state
        allowed = sorted(context.lender.states)
        passed = state in context.lender.states

        return self._result(
            context,
            passed,
            f"State '{state}' is not served (allowed: {', '.join(allowed)})",
            actual=state,
            allowed_states=allowed,
        )
