from .logging_seat_reservation_gateway import LoggingSeatReservationGateway
from .logging_ticket_payment_gateway import LoggingTicketPaymentGateway

__all__ = ["LoggingTicketPaymentGateway", "LoggingSeatReservationGateway"]
