"""Rule engine for lender eligibility and APR pricing."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .engine import LenderEvaluationResult, RuleEngine
from .scoring import ScoringEngine

__all__ = [
    "EvaluationContext",
    "EvaluationResult",
    "LenderEvaluationResult",
    "RuleEngine",
    "RuleEvaluator",
    "ScoringEngine",
]
