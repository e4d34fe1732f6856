from typing import Any

from pydantic import BaseModel, Field


class TicketTypeRequest(BaseModel):
    """チケット種別ごとのリクエストモデル

    値の妥当性（種別名・枚数）はドメイン層で検証するため、
    枚数は型変換せずそのまま受け取る。
    """

    ticket_type: str = Field(
        ...,
        description="チケット種別（ADULT / CHILD / INFANT）",
        examples=["ADULT"],
    )
    quantity: Any = Field(
        ...,
        description="購入枚数",
        examples=[2],
    )


class PurchaseTicketsRequest(BaseModel):
    """チケット購入リクエストモデル"""

    account_id: Any = Field(..., description="アカウントID")
    ticket_requests: list[TicketTypeRequest] | None = None
