# 🎁 checkout_upsell/domain/offers/__init__.py
"""
🎁 Пакет `domain.offers` публікує сутності, контракти та чисті сервіси вибору.
"""

from .entities import Money, OfferCandidate, OrderLine, OrderSnapshot, PurchasableUnit, snapshot_of
from .interfaces import ICatalogQuery, IOrderMutationService, MutationOutcome, OutcomeKind
from .services import filter_candidates, merchandise_ids, select_offer

__all__ = [
    "Money",
    "OfferCandidate",
    "OrderLine",
    "OrderSnapshot",
    "PurchasableUnit",
    "snapshot_of",
    "ICatalogQuery",
    "IOrderMutationService",
    "MutationOutcome",
    "OutcomeKind",
    "filter_candidates",
    "merchandise_ids",
    "select_offer",
]
