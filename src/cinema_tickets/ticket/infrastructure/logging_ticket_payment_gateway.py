from aws_lambda_powertools import Logger

from cinema_tickets.shared.utils import ensure_int
from cinema_tickets.ticket.domain.gateway import TicketPaymentGateway

logger = Logger(child=True)


class LoggingTicketPaymentGateway(TicketPaymentGateway):
    """決済ゲートウェイの実装

    引数の契約を検証し、受け付けた決済をログに記録する。
    """

    def make_payment(self, account_id: int, amount: int) -> None:
        ensure_int("account_id", account_id)
        ensure_int("amount", amount)

        logger.info(
            "Payment accepted",
            extra={"account_id": account_id, "amount": amount},
        )
