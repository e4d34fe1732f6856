from .seat_reservation_gateway import SeatReservationGateway
from .ticket_payment_gateway import TicketPaymentGateway

__all__ = ["TicketPaymentGateway", "SeatReservationGateway"]
