from .account_id import AccountId
from .purchase_outcome import PurchaseOutcome
from .purchase_request import PurchaseRequest
from .ticket_request_item import TicketRequestItem
from .ticket_tally import TicketTally

__all__ = [
    "AccountId",
    "TicketRequestItem",
    "PurchaseRequest",
    "TicketTally",
    "PurchaseOutcome",
]
