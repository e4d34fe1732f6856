from .enum import TicketCategory
from .exception import (
    AdultRequiredException,
    InvalidAccountException,
    InvalidPurchaseException,
    InvalidTicketRequestException,
    NoTicketsException,
    TicketLimitExceededException,
)
from .factory import PurchaseOutcomeFactory
from .gateway import SeatReservationGateway, TicketPaymentGateway
from .service import MAX_TICKETS_PER_PURCHASE, PurchasePolicy
from .value_object import (
    AccountId,
    PurchaseOutcome,
    PurchaseRequest,
    TicketRequestItem,
    TicketTally,
)

__all__ = [
    "TicketCategory",
    "AccountId",
    "TicketRequestItem",
    "PurchaseRequest",
    "TicketTally",
    "PurchaseOutcome",
    "PurchaseOutcomeFactory",
    "PurchasePolicy",
    "MAX_TICKETS_PER_PURCHASE",
    "TicketPaymentGateway",
    "SeatReservationGateway",
    "InvalidPurchaseException",
    "InvalidAccountException",
    "NoTicketsException",
    "InvalidTicketRequestException",
    "AdultRequiredException",
    "TicketLimitExceededException",
]
