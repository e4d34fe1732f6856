from cinema_tickets.ticket.domain.exception import (
    AdultRequiredException,
    TicketLimitExceededException,
)
from cinema_tickets.ticket.domain.value_object import PurchaseRequest, TicketTally

MAX_TICKETS_PER_PURCHASE = 20


class PurchasePolicy:
    """購入ルールを検証するドメインサービス

    - 子供・乳児チケットは大人チケットと一緒にのみ購入できる
    - 1回の購入は MAX_TICKETS_PER_PURCHASE 枚まで

    ルールは全リクエストを集計した後に、上記の順で評価する。
    """

    def validate(self, request: PurchaseRequest) -> TicketTally:
        """購入リクエストを検証し、集計結果を返す

        Raises:
            AdultRequiredException: 大人チケットなしで子供・乳児チケットを含む場合
            TicketLimitExceededException: 合計枚数が上限を超える場合
        """
        tally = TicketTally.from_items(request.ticket_requests)

        if tally.has_child_or_infant and not tally.has_adult:
            raise AdultRequiredException(
                "Cannot purchase child/infant tickets without at least 1 adult ticket"
            )

        if tally.total > MAX_TICKETS_PER_PURCHASE:
            raise TicketLimitExceededException(
                f"Only {MAX_TICKETS_PER_PURCHASE} tickets can be purchased at one time"
            )

        return tally
