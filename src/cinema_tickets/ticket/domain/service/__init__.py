from .purchase_policy import MAX_TICKETS_PER_PURCHASE, PurchasePolicy

__all__ = ["PurchasePolicy", "MAX_TICKETS_PER_PURCHASE"]
