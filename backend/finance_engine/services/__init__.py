"""Service layer for financing estimates."""

from finance_engine.services.amortization import monthly_payment
from finance_engine.services.financing_engine import FinancingEngine, estimate

__all__ = ["FinancingEngine", "estimate", "monthly_payment"]
