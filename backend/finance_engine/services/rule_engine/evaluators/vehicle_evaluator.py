"""Vehicle eligibility evaluator for model year and mileage caps."""

from finance_engine.core.enums import EligibilityCheck
from finance_engine.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class VehicleEvaluator(RuleEvaluator):
    """
    Evaluator for vehicle-related caps.

    Handles:
    - MIN_YEAR: vehicle model year must be at least caps.min_year
    - MAX_MILES: mileage must not exceed caps.max_miles

    Missing caps are unbounded.
    """

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        if context.check == EligibilityCheck.MIN_YEAR:
            return self._evaluate_min_year(context)
        elif context.check == EligibilityCheck.MAX_MILES:
            return self._evaluate_max_miles(context)
        raise self._unsupported(context)

    def _evaluate_min_year(self, context: EvaluationContext) -> EvaluationResult:
        year = context.pricing.vehicle_year
        caps = context.lender.caps
        min_year = caps.min_year if caps else None
        passed = min_year is None or year >= min_year

        return self._result(
            context,
            passed,
            f"Vehicle year {year} is older than minimum {min_year}",
            actual=year,
            min_year=min_year,
        )

    def _evaluate_max_miles(self, context: EvaluationContext) -> EvaluationResult:
        mileage = context.pricing.mileage
        caps = context.lender.caps
        max_miles = caps.max_miles if caps else None
        passed = max_miles is None or mileage <= max_miles

        return self._result(
            context,
            passed,
            f"Mileage {mileage} exceeds maximum {max_miles}",
            actual=str(mileage),
            max_miles=max_miles,
        )
