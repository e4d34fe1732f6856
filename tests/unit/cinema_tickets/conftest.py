from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from cinema_tickets.ticket.domain.enum import TicketCategory
from cinema_tickets.ticket.domain.gateway import (
    SeatReservationGateway,
    TicketPaymentGateway,
)
from cinema_tickets.ticket.domain.value_object import (
    AccountId,
    PurchaseRequest,
    TicketRequestItem,
)


@pytest.fixture
def account_id():
    """全テスト共通の AccountId フィクスチャ"""
    return AccountId(value=1)


@pytest.fixture
def mock_payment_gateway():
    """決済ゲートウェイのモックフィクスチャ"""
    return MagicMock(spec=TicketPaymentGateway)


@pytest.fixture
def mock_reservation_gateway():
    """座席予約ゲートウェイのモックフィクスチャ"""
    return MagicMock(spec=SeatReservationGateway)


@pytest.fixture
def create_purchase_request():
    """PurchaseRequest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        adult: int = 0,
        child: int = 0,
        infant: int = 0,
        account_id: int = 1,
    ) -> PurchaseRequest:
        items = [
            TicketRequestItem(category=category, count=count)
            for category, count in (
                (TicketCategory.ADULT, adult),
                (TicketCategory.CHILD, child),
                (TicketCategory.INFANT, infant),
            )
            if count > 0
        ]
        return PurchaseRequest.create(account_id, items)

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "ticket-purchase"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:ticket-purchase"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのフィクスチャ"""
    return FakeLambdaContext()
