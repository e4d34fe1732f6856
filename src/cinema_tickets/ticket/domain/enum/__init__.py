from .ticket_category import TicketCategory

__all__ = ["TicketCategory"]
