"""Loan structure eligibility evaluator for product, term and LTV checks."""

from finance_engine.core.enums import EligibilityCheck
from finance_engine.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class LoanEvaluator(RuleEvaluator):
    """
    Evaluator for loan-related checks.

    Handles:
    - PRODUCT: requested product must be offered by the lender
    - TERM: requested term must be one of the lender's terms
    - MAX_LTV: loan-to-value ratio must not exceed caps.max_ltv
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        if context.check == EligibilityCheck.PRODUCT:
            return self._evaluate_product(context)
        elif context.check == EligibilityCheck.TERM:
            return self._evaluate_term(context)
        elif context.check == EligibilityCheck.MAX_LTV:
            return self._evaluate_max_ltv(context)
        raise self._unsupported(context)

    def _evaluate_product(self, context: EvaluationContext) -> EvaluationResult:
        product = context.pricing.product
        passed = product in context.lender.products

        return self._result(
            context,
            passed,
            f"Product '{product}' is not offered",
            actual=product,
            allowed_products=sorted(context.lender.products),
        )

    def _evaluate_term(self, context: EvaluationContext) -> EvaluationResult:
        term = context.pricing.term
        passed = term in context.lender.terms

        return self._result(
            context,
            passed,
            f"Term of {term} months is not offered",
            actual=term,
            allowed_terms=sorted(context.lender.terms),
        )

    def _evaluate_max_ltv(self, context: EvaluationContext) -> EvaluationResult:
        ltv = context.pricing.ltv
        caps = context.lender.caps
        max_ltv = caps.max_ltv if caps else None

        # No cap means unbounded
        passed = max_ltv is None or ltv <= max_ltv

        return self._result(
            context,
            passed,
            f"LTV {ltv:.4f} exceeds maximum {max_ltv}",
            actual=str(ltv),
            max_ltv=None if max_ltv is None else str(max_ltv),
        )
