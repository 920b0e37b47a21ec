"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class BalanceComputationError(DomainException):
    """Balance could not be computed from otherwise valid input"""

    pass
