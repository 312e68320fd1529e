# 🧾 checkout_upsell/upsell/order_snapshot.py
"""
🧾 OrderSnapshotFeed: стрічка знімків поточного замовлення з явною підпискою.

Хост публікує новий знімок щоразу, коли змінюються рядки замовлення
(покупець прибрав товар, змінив кількість, успішна мутація тощо).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Callable, Iterable, List

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.domain.offers.entities import OrderLine, OrderSnapshot, snapshot_of
from checkout_upsell.shared.utils.logger import get_logger

logger = get_logger("order_feed")

SnapshotListener = Callable[[OrderSnapshot], None]


class OrderSnapshotFeed:
    """🧾 Тримає останній знімок і розсилає його підписникам."""

    def __init__(self, lines: Iterable[OrderLine] = ()) -> None:
        self._lines: OrderSnapshot = snapshot_of(lines)
        self._listeners: List[SnapshotListener] = []

    @property
    def lines(self) -> OrderSnapshot:
        return self._lines

    def publish(self, lines: Iterable[OrderLine]) -> None:
        self._lines = snapshot_of(lines)
        logger.debug("🧾 Новий знімок замовлення: %d рядків", len(self._lines))
        for listener in list(self._listeners):
            listener(self._lines)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Реєструє слухача; повертає функцію відписки."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)


__all__ = ["OrderSnapshotFeed", "SnapshotListener"]
