from collections.abc import Iterable

from cinema_tickets.ticket.domain.factory import PurchaseOutcomeFactory
from cinema_tickets.ticket.domain.gateway import (
    SeatReservationGateway,
    TicketPaymentGateway,
)
from cinema_tickets.ticket.domain.service import PurchasePolicy
from cinema_tickets.ticket.domain.value_object import (
    PurchaseOutcome,
    PurchaseRequest,
    TicketRequestItem,
)


class PurchaseTicketsService:
    """チケット購入ユースケース

    検証 → 集計 → 決済・座席予約 の順で処理する。
    dry_run の場合は外部サービスを呼び出さず、購入結果を返す。
    """

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        reservation_gateway: SeatReservationGateway,
        dry_run: bool = False,
        policy: PurchasePolicy | None = None,
        factory: PurchaseOutcomeFactory | None = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway
        self._dry_run = dry_run
        self._policy = policy or PurchasePolicy()
        self._factory = factory or PurchaseOutcomeFactory()

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def purchase(
        self,
        account_id: int,
        ticket_requests: Iterable[TicketRequestItem] | None,
    ) -> PurchaseOutcome | None:
        """チケットを購入する

        Returns:
            PurchaseOutcome | None: dry_run の場合は購入結果、それ以外は None

        Raises:
            InvalidPurchaseException: 検証に失敗した場合（外部サービスは呼ばれない）
        """
        # 1. 入力を Value Object に変換（アカウント・リクエスト形式の検証）
        request = PurchaseRequest.create(account_id, ticket_requests)

        # 2. ビジネスルールの検証
        self._policy.validate(request)

        # 3. 合計金額・座席数を算出
        outcome = self._factory.create(request)

        if self._dry_run:
            return outcome

        # 4. 決済 → 座席予約（予約失敗時の払い戻しは行わない）
        self._payment_gateway.make_payment(
            outcome.account_id.value, outcome.total_amount
        )
        self._reservation_gateway.reserve_seat(
            outcome.account_id.value, outcome.total_seats
        )
        return None
