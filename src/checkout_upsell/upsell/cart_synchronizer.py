# 🔄 checkout_upsell/upsell/cart_synchronizer.py
"""
🔄 CartSynchronizer: перераховує вибір при кожній зміні кандидатів або замовлення.

🔹 Підписка на `OrderSnapshotFeed` робиться явно через `attach()`.
🔹 Сам перерахунок - чисті `filter_candidates` + `select_offer`, без збереженого стану між викликами.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Callable, Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.domain.offers.entities import OfferCandidate, OrderSnapshot
from checkout_upsell.domain.offers.services import filter_candidates, select_offer
from checkout_upsell.shared.utils.logger import get_logger
from .order_snapshot import OrderSnapshotFeed
from .state import ChangeListener, notify

logger = get_logger("sync")

CandidatesProvider = Callable[[], Sequence[OfferCandidate]]


class CartSynchronizer:
    """🔄 Тримає актуальні `available` та `selection` для рендерингу."""

    def __init__(
        self,
        feed: OrderSnapshotFeed,
        candidates: CandidatesProvider,
        *,
        on_change: Optional[ChangeListener] = None,
    ) -> None:
        self._feed = feed
        self._candidates = candidates
        self._on_change = on_change
        self._available: Tuple[OfferCandidate, ...] = ()
        self._selection: Optional[OfferCandidate] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def available(self) -> Tuple[OfferCandidate, ...]:
        return self._available

    @property
    def selection(self) -> Optional[OfferCandidate]:
        return self._selection

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._feed.subscribe(self._on_snapshot)
            logger.debug("🔗 Підписка на знімки замовлення активна")

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("🔌 Підписку на знімки замовлення знято")

    def recompute(self) -> Optional[OfferCandidate]:
        previous = self._selection
        self._available = filter_candidates(self._candidates(), self._feed.lines)
        self._selection = select_offer(self._available)
        if previous != self._selection:
            logger.info(
                "🎯 Вибір змінено: %s → %s",
                previous.id if previous else None,
                self._selection.id if self._selection else None,
            )
        notify(self._on_change)
        return self._selection

    def _on_snapshot(self, _lines: OrderSnapshot) -> None:
        self.recompute()


__all__ = ["CartSynchronizer", "CandidatesProvider"]
