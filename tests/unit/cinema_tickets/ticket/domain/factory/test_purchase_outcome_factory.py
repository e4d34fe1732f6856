from cinema_tickets.ticket.domain.factory import PurchaseOutcomeFactory
from cinema_tickets.ticket.domain.value_object import AccountId, PurchaseOutcome


class TestPurchaseOutcomeFactory:
    def test_create_purchase_outcome(self, create_purchase_request):
        factory = PurchaseOutcomeFactory()
        request = create_purchase_request(adult=2, child=1, infant=1)

        outcome = factory.create(request)

        assert isinstance(outcome, PurchaseOutcome)
        assert outcome.account_id == AccountId(value=1)
        # 2×20 + 1×10 + 1×0
        assert outcome.total_amount == 50
        # 2×1 + 1×1 + 1×0
        assert outcome.total_seats == 3

    def test_single_adult(self, create_purchase_request):
        outcome = PurchaseOutcomeFactory().create(create_purchase_request(adult=1))

        assert outcome.total_amount == 20
        assert outcome.total_seats == 1

    def test_create_is_repeatable(self, create_purchase_request):
        factory = PurchaseOutcomeFactory()
        request = create_purchase_request(adult=3, child=2)

        assert factory.create(request) == factory.create(request)
