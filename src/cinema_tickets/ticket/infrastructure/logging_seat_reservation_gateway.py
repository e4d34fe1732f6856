from aws_lambda_powertools import Logger

from cinema_tickets.shared.utils import ensure_int
from cinema_tickets.ticket.domain.gateway import SeatReservationGateway

logger = Logger(child=True)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """座席予約ゲートウェイの実装

    引数の契約を検証し、確保した座席数をログに記録する。
    """

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        ensure_int("account_id", account_id)
        ensure_int("seat_count", seat_count)

        logger.info(
            "Seats reserved",
            extra={"account_id": account_id, "seat_count": seat_count},
        )
