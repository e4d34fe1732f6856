import os

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from cinema_tickets.ticket.applications.purchase_tickets import PurchaseTicketsService
from cinema_tickets.ticket.domain.exception import InvalidPurchaseException
from cinema_tickets.ticket.domain.value_object import AccountId, TicketRequestItem
from cinema_tickets.ticket.handlers.request_models import PurchaseTicketsRequest
from cinema_tickets.ticket.handlers.response_models import (
    to_error_response,
    to_response,
)
from cinema_tickets.ticket.infrastructure import (
    LoggingSeatReservationGateway,
    LoggingTicketPaymentGateway,
)

logger = Logger()

DRY_RUN = os.environ.get("DRY_RUN", "false").lower() == "true"

service = PurchaseTicketsService(
    payment_gateway=LoggingTicketPaymentGateway(),
    reservation_gateway=LoggingSeatReservationGateway(),
    dry_run=DRY_RUN,
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """チケット購入の Lambda ハンドラー

    購入ルール違反はエラーレスポンスとして返す。
    決済・座席予約の失敗はそのまま送出する。
    """
    logger.info(
        "Received purchase tickets request", extra={"dry_run": service.dry_run}
    )

    payload = event.get("Payload", event)
    try:
        request = PurchaseTicketsRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid request payload")
        return to_error_response(
            "VALIDATION_ERROR",
            "Invalid request payload",
            details=e.errors(include_url=False, include_context=False),
        )

    try:
        # アカウントIDはチケットリクエストより先に検証する
        AccountId(value=request.account_id)
        ticket_requests = None
        if request.ticket_requests is not None:
            ticket_requests = [
                TicketRequestItem.of(r.ticket_type, r.quantity)
                for r in request.ticket_requests
            ]
        outcome = service.purchase(request.account_id, ticket_requests)
    except InvalidPurchaseException as e:
        logger.warning(
            "Purchase rejected",
            extra={"error_code": e.error_code, "account_id": request.account_id},
        )
        return to_error_response(e.error_code, str(e))

    logger.info("Purchase completed", extra={"account_id": request.account_id})
    return to_response(outcome)
