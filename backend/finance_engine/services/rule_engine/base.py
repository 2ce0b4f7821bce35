"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from finance_engine.core.enums import EligibilityCheck
from finance_engine.models.domain.catalog import LenderRule, ScoreBand
from finance_engine.models.domain.pricing import PricingContext


@dataclass(frozen=True)
class EvaluationContext:
    """
    Everything an eligibility check needs to judge one lender.

    Attributes:
        pricing: Request-derived pricing context
        band: Score band selected for the request
        lender: The lender rule being evaluated
        check: The specific check being evaluated
    """

    pricing: PricingContext
    band: ScoreBand
    lender: LenderRule
    check: EligibilityCheck


@dataclass
class EvaluationResult:
    """
    Result of one eligibility check against one lender.

    Attributes:
        passed: Whether the check passed
        check: The check that produced this result
        reason: Human-readable explanation, set when the check failed
        evidence: Actual vs. required values
    """

    passed: bool
    check: EligibilityCheck
    reason: Optional[str] = None
    evidence: dict[str, Any] = field(default_factory=dict)


class RuleEvaluator(ABC):
    """
    Abstract base class for eligibility evaluators using the Strategy pattern.

    Each concrete evaluator implements one family of checks (geography,
    loan terms, vehicle limits, band pricing) and routes on context.check.
    """

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate a check against the provided context.

        Raises:
            ValueError: If the evaluator cannot handle context.check
        """
        pass

    def _result(
        self,
        context: EvaluationContext,
        passed: bool,
        reason: str,
        **evidence: Any,
    ) -> EvaluationResult:
        return EvaluationResult(
            passed=passed,
            check=context.check,
            reason=None if passed else reason,
            evidence=evidence,
        )

    def _unsupported(self, context: EvaluationContext) -> ValueError:
        return ValueError(
            f"{type(self).__name__} cannot handle check: {context.check.value}"
        )
