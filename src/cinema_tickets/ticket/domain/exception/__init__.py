from .exceptions import (
    AdultRequiredException,
    InvalidAccountException,
    InvalidPurchaseException,
    InvalidTicketRequestException,
    NoTicketsException,
    TicketLimitExceededException,
)

__all__ = [
    "InvalidPurchaseException",
    "InvalidAccountException",
    "NoTicketsException",
    "InvalidTicketRequestException",
    "AdultRequiredException",
    "TicketLimitExceededException",
]
