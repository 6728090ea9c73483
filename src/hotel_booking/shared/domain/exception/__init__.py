from .exceptions import (
    BookingOverlapException,
    BusinessRuleViolationException,
    DomainException,
    FailedInitializationException,
    InvalidArgumentException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidArgumentException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "BookingOverlapException",
    "FailedInitializationException",
]
