"""Unit tests for the amortization calculator"""

from decimal import Decimal

import pytest

from finance_engine.core.exceptions import InvalidTermError, ValidationError
from finance_engine.services.amortization import monthly_payment


def test_zero_rate_is_straight_line():
    """Test zero APR divides principal evenly"""
    assert monthly_payment(Decimal("0"), Decimal("12000"), 12) == Decimal("1000.00")


def test_standard_amortization():
    """Test 6% APR over 60 months on $20,000"""
    assert monthly_payment(Decimal("0.06"), Decimal("20000"), 60) == Decimal("386.66")


def test_accepts_plain_numbers():
    """Test floats and ints are converted without binary rounding drift"""
    assert monthly_payment(0.06, 20000, 60) == Decimal("386.66")
    assert monthly_payment(0, 12000, 12) == Decimal("1000.00")


def test_rounds_to_cents():
    """Test payment is quantized to two decimal places"""
    payment = monthly_payment(Decimal("0"), Decimal("1000"), 3)

    assert payment == Decimal("333.33")
    assert payment.as_tuple().exponent == -2


def test_zero_principal():
    """Test nothing financed means no payment"""
    assert monthly_payment(Decimal("0.08"), Decimal("0"), 60) == Decimal("0.00")


def test_negative_rate_uses_same_formula():
    """Test a small negative APR lowers the payment below straight-line"""
    payment = monthly_payment(Decimal("-0.01"), Decimal("12000"), 12)

    assert Decimal("0") < payment < Decimal("1000.00")


def test_higher_rate_means_higher_payment():
    """Test payment grows with APR"""
    low = monthly_payment(Decimal("0.05"), Decimal("20000"), 60)
    high = monthly_payment(Decimal("0.09"), Decimal("20000"), 60)

    assert low < high


@pytest.mark.parametrize("months", [0, -12])
def test_non_positive_term_rejected(months: int):
    """Test non-positive terms raise InvalidTermError"""
    with pytest.raises(InvalidTermError):
        monthly_payment(Decimal("0.06"), Decimal("20000"), months)


def test_payment_beyond_cent_precision_rejected():
    """Test payments too large to round to cents raise ValidationError"""
    with pytest.raises(ValidationError, match="too large to price"):
        monthly_payment(Decimal("0"), Decimal("1E+40"), 12)
