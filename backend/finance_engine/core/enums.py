"""Core enums for type safety across the application."""

from enum import Enum


class Product(str, Enum):
    """Financing product identifiers used by lender rules."""

    AUTO_USED = "auto-used"
    AUTO_NEW = "auto-new"


class ContextField(str, Enum):
    """Pricing context fields an adjuster predicate can test."""

    USED = "used"
    TERM = "term"
    LTV = "ltv"
    STATE = "state"


class Comparator(str, Enum):
    """Comparison operators for adjuster predicates."""

    EQ = "eq"
    GE = "ge"
    LE = "le"


class EligibilityCheck(str, Enum):
    """Lender eligibility checks, in the order they are applied."""

    STATE = "state"
    PRODUCT = "product"
    TERM = "term"
    MAX_LTV = "max_ltv"
    MIN_YEAR = "min_year"
    MAX_MILES = "max_miles"
    BAND_PRICING = "band_pricing"
