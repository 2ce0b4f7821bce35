"""Domain-specific exceptions for the financing engine."""


class FinancingError(Exception):
    """Base exception for the financing engine"""

    pass


class ValidationError(FinancingError):
    """Financing request has a malformed or missing field"""

    pass


class OutOfRangeError(FinancingError):
    """Credit score matches no configured score band"""

    pass


class ConfigurationError(FinancingError):
    """Rule catalog is missing or cannot be parsed"""

    pass


class InvalidTermError(FinancingError):
    """Loan term is not a positive number of months"""

    pass
