"""Rule engine orchestrator for lender eligibility checks."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from finance_engine.core.enums import EligibilityCheck
from finance_engine.models.domain.catalog import LenderRule, ScoreBand
from finance_engine.models.domain.pricing import PricingContext
from finance_engine.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from finance_engine.services.rule_engine.evaluators import (
    CreditEvaluator,
    GeographicEvaluator,
    LoanEvaluator,
    VehicleEvaluator,
)

logger = logging.getLogger(__name__)

# Checks run in this order; evaluation stops at the first failure.
CHECK_ORDER: tuple[EligibilityCheck, ...] = (
    EligibilityCheck.STATE,
    EligibilityCheck.PRODUCT,
    EligibilityCheck.TERM,
    EligibilityCheck.MAX_LTV,
    EligibilityCheck.MIN_YEAR,
    EligibilityCheck.MAX_MILES,
    EligibilityCheck.BAND_PRICING,
)


@dataclass
class LenderEvaluationResult:
    """
    Result of running every eligibility check for one lender.

    Attributes:
        lender: The lender evaluated
        is_eligible: True when every check passed
        rejection_reason: Reason from the first failed check
        rejection_check: The first failed check
        rejection_evidence: Actual vs. required values for the failed check
        check_results: Results of the checks that ran, in order
    """

    lender: LenderRule
    is_eligible: bool
    rejection_reason: Optional[str] = None
    rejection_check: Optional[EligibilityCheck] = None
    rejection_evidence: Dict[str, Any] = field(default_factory=dict)
    check_results: List[EvaluationResult] = field(default_factory=list)


class RuleEngine:
    """
    Rule engine orchestrator for lender eligibility.

    This class:
    - Maintains a registry of evaluators per eligibility check
    - Runs checks in a fixed order with early exit on the first failure
    - Filters a lender list down to the eligible lenders, keeping order
    """

    def __init__(self):
        """Initialize the rule engine with evaluator registry."""
        self._evaluators: Dict[EligibilityCheck, RuleEvaluator] = {}
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators for all checks."""
        geographic_evaluator = GeographicEvaluator()
        self._evaluators[EligibilityCheck.STATE] = geographic_evaluator

        loan_evaluator = LoanEvaluator()
        self._evaluators[EligibilityCheck.PRODUCT] = loan_evaluator
        self._evaluators[EligibilityCheck.TERM] = loan_evaluator
        self._evaluators[EligibilityCheck.MAX_LTV] = loan_evaluator

        vehicle_evaluator = VehicleEvaluator()
        self._evaluators[EligibilityCheck.MIN_YEAR] = vehicle_evaluator
        self._evaluators[EligibilityCheck.MAX_MILES] = vehicle_evaluator

        self._evaluators[EligibilityCheck.BAND_PRICING] = CreditEvaluator()

    def register_evaluator(
        self, check: EligibilityCheck, evaluator: RuleEvaluator
    ) -> None:
        """
        Register a custom evaluator for a specific check.

        Args:
            check: The check to handle
            evaluator: The evaluator instance
        """
        self._evaluators[check] = evaluator

    def evaluate_lender(
        self,
        lender: LenderRule,
        pricing: PricingContext,
        band: ScoreBand,
    ) -> LenderEvaluationResult:
        """
        Run all eligibility checks for one lender.

        Args:
            lender: Lender rule to check
            pricing: Request pricing context
            band: Selected score band

        Returns:
            LenderEvaluationResult with eligibility and the first failure, if any
        """
        check_results: List[EvaluationResult] = []

        for check in CHECK_ORDER:
            context = EvaluationContext(
                pricing=pricing,
                band=band,
                lender=lender,
                check=check,
            )
            result = self._evaluators[check].evaluate(context)
            check_results.append(result)

            if not result.passed:
                return LenderEvaluationResult(
                    lender=lender,
                    is_eligible=False,
                    rejection_reason=result.reason,
                    rejection_check=check,
                    rejection_evidence=result.evidence,
                    check_results=check_results,
                )

        return LenderEvaluationResult(
            lender=lender,
            is_eligible=True,
            check_results=check_results,
        )

    def filter_eligible(
        self,
        lenders: Iterable[LenderRule],
        pricing: PricingContext,
        band: ScoreBand,
    ) -> List[LenderRule]:
        """
        Keep the lenders that pass every check, in their original order.

        Rejections are logged at DEBUG with the failing check, reason and
        evidence.
        """
        eligible: List[LenderRule] = []

        for lender in lenders:
            evaluation = self.evaluate_lender(lender, pricing, band)
            if evaluation.is_eligible:
                eligible.append(lender)
                continue

            logger.debug(
                "Lender rejected",
                extra={
                    "lender_id": lender.id,
                    "check": evaluation.rejection_check.value,
                    "reason": evaluation.rejection_reason,
                    "evidence": evaluation.rejection_evidence,
                },
            )

        return eligible
