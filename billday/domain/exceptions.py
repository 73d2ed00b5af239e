"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DateOutOfRangeError(DomainException):
    """Resolved due date falls outside the supported calendar (years 1-9999)"""

    pass


class InvalidBillCycleError(DomainException):
    """Bill cycle is negative"""

    pass


class NotificationError(DomainException):
    """Push notification could not be delivered"""

    pass
