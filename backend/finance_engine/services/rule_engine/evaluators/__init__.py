"""Eligibility evaluators for lender rule checks."""

from .credit_evaluator import CreditEvaluator
from .geographic_evaluator import GeographicEvaluator
from .loan_evaluator import LoanEvaluator
from .vehicle_evaluator import VehicleEvaluator

__all__ = [
    "CreditEvaluator",
    "GeographicEvaluator",
    "LoanEvaluator",
    "VehicleEvaluator",
]
