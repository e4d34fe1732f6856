from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    TypeMismatchException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "TypeMismatchException",
]
