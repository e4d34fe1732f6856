from dataclasses import dataclass

from cinema_tickets.ticket.domain.value_object.account_id import AccountId


@dataclass(frozen=True)
class PurchaseOutcome:
    """購入結果（合計金額と合計座席数）

    購入ごとに1つ生成され、永続化はしない。
    """

    account_id: AccountId
    total_amount: int
    total_seats: int

    def __post_init__(self) -> None:
        if self.total_amount < 0:
            raise ValueError("Total amount cannot be negative")
        if self.total_seats < 0:
            raise ValueError("Total seats cannot be negative")

    def to_dict(self) -> dict:
        """レスポンス用の辞書表現を返す"""
        return {
            "account_id": self.account_id.value,
            "total_amount": self.total_amount,
            "total_seats": self.total_seats,
        }
