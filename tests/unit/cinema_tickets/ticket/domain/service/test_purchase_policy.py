import pytest

from cinema_tickets.ticket.domain.enum import TicketCategory
from cinema_tickets.ticket.domain.exception import (
    AdultRequiredException,
    TicketLimitExceededException,
)
from cinema_tickets.ticket.domain.service import (
    MAX_TICKETS_PER_PURCHASE,
    PurchasePolicy,
)
from cinema_tickets.ticket.domain.value_object import PurchaseRequest, TicketRequestItem


class TestPurchasePolicy:
    def test_validate_returns_tally(self, create_purchase_request):
        policy = PurchasePolicy()
        request = create_purchase_request(adult=2, child=1, infant=1)

        tally = policy.validate(request)

        assert tally.count(TicketCategory.ADULT) == 2
        assert tally.total == 4

    def test_single_adult_is_valid(self, create_purchase_request):
        tally = PurchasePolicy().validate(create_purchase_request(adult=1))
        assert tally.total == 1

    @pytest.mark.parametrize(
        ("child", "infant"),
        [(1, 0), (0, 1), (2, 3)],
    )
    def test_child_or_infant_without_adult_raises_error(
        self, create_purchase_request, child, infant
    ):
        with pytest.raises(AdultRequiredException, match="at least 1 adult"):
            PurchasePolicy().validate(
                create_purchase_request(child=child, infant=infant)
            )

    def test_exactly_max_tickets_is_valid(self, create_purchase_request):
        request = create_purchase_request(adult=10, child=5, infant=5)

        tally = PurchasePolicy().validate(request)

        assert tally.total == MAX_TICKETS_PER_PURCHASE

    @pytest.mark.parametrize(
        ("adult", "child", "infant"),
        [(21, 0, 0), (1, 20, 0), (10, 5, 6)],
    )
    def test_over_max_tickets_raises_error(
        self, create_purchase_request, adult, child, infant
    ):
        with pytest.raises(TicketLimitExceededException, match="Only 20 tickets"):
            PurchasePolicy().validate(
                create_purchase_request(adult=adult, child=child, infant=infant)
            )

    def test_limit_counts_tickets_not_requests(self):
        """リクエスト件数ではなく枚数の合計で上限を判定する"""
        request = PurchaseRequest.create(
            1,
            [
                TicketRequestItem.of("ADULT", 11),
                TicketRequestItem.of("ADULT", 10),
            ],
        )

        with pytest.raises(TicketLimitExceededException):
            PurchasePolicy().validate(request)

    def test_adult_rule_is_checked_before_limit(self, create_purchase_request):
        request = create_purchase_request(child=15, infant=10)

        with pytest.raises(AdultRequiredException):
            PurchasePolicy().validate(request)

