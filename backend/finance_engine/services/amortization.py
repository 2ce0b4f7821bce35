"""Fixed-rate amortization for monthly loan payments."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from finance_engine.core.exceptions import InvalidTermError, ValidationError

CENTS = Decimal("0.01")
MONTHS_PER_YEAR = 12

Number = Union[Decimal, int, float, str]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def monthly_payment(apr: Number, principal: Number, months: int) -> Decimal:
    """
    Calculate the fixed monthly payment for an amortized loan.

    Uses the standard annuity formula with periodic rate r = apr / 12:

        payment = (r * principal) / (1 - (1 + r) ** -months)

    A zero rate falls back to straight-line repayment. Negative rates go
    through the same formula.

    Args:
        apr: Annual percentage rate as a decimal fraction (0.06 = 6%)
        principal: Amount financed
        months: Number of monthly payments

    Returns:
        Payment rounded to cents

    Raises:
        InvalidTermError: If months is not positive
        ValidationError: If the payment is too large to round to cents

    Example:
        monthly_payment(Decimal("0.06"), Decimal("20000"), 60) -> Decimal("386.66")
    """
    if months <= 0:
        raise InvalidTermError(f"Loan term must be a positive number of months, got {months}")

    rate = _to_decimal(apr) / MONTHS_PER_YEAR
    amount = _to_decimal(principal)

    if rate == 0:
        payment = amount / months
    else:
        payment = (rate * amount) / (1 - (1 + rate) ** -months)

    try:
        return payment.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValidationError(f"Payment of {payment:.6E} is too large to price") from e
