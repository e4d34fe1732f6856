from __future__ import annotations

from pydantic import BaseModel

from cinema_tickets.ticket.domain.value_object import PurchaseOutcome


class PurchaseData(BaseModel):
    """購入結果のレスポンスモデル"""

    account_id: int
    total_amount: int
    total_seats: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PurchaseData | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_response(outcome: PurchaseOutcome | None) -> dict:
    """購入結果をレスポンス辞書に変換する

    dry_run でない場合は購入結果がないため data を含めない。
    """
    if outcome is None:
        return SuccessResponse().model_dump(exclude_none=True)
    return SuccessResponse(
        data=PurchaseData(**outcome.to_dict())
    ).model_dump(exclude_none=True)


def to_error_response(
    error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
