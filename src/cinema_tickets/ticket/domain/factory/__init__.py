from .purchase_outcome_factory import PurchaseOutcomeFactory

__all__ = ["PurchaseOutcomeFactory"]
