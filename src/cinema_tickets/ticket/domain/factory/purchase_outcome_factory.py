from cinema_tickets.ticket.domain.value_object import PurchaseOutcome, PurchaseRequest


class PurchaseOutcomeFactory:
    """購入結果のファクトリ

    - チケットリクエストから合計金額と合計座席数を算出する
    - 計算は呼び出しごとに完結し、状態を持たない
    """

    def create(self, request: PurchaseRequest) -> PurchaseOutcome:
        """検証済みの購入リクエストから購入結果を生成する"""
        total_amount = 0
        total_seats = 0
        for ticket_request in request.ticket_requests:
            total_amount += ticket_request.amount
            total_seats += ticket_request.seats

        return PurchaseOutcome(
            account_id=request.account_id,
            total_amount=total_amount,
            total_seats=total_seats,
        )
