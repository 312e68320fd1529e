# 🧩 checkout_upsell/domain/offers/interfaces.py
"""
🧩 Контракти зовнішніх сервісів, які споживає upsell-ядро.

🔹 `ICatalogQuery` - регіональний запит кандидатів (може кинути `CatalogFetchError`).
🔹 `IOrderMutationService` - додавання рядка; завжди повертає `MutationOutcome`, не кидає.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.domain.locale.region_resolver import RegionCode
from .entities import OfferCandidate, OrderLine


# ================================
# 📚 КАТАЛОГ
# ================================
class ICatalogQuery(Protocol):
    async def fetch_offers(self, region: RegionCode, first: int) -> Sequence[OfferCandidate]:
        """Повертає до `first` кандидатів у порядку каталогу."""
        ...


# ================================
# 🛒 МУТАЦІЯ ЗАМОВЛЕННЯ
# ================================
class OutcomeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class MutationOutcome:
    """🛒 Результат `add_line`: оновлене замовлення або діагностичне повідомлення."""

    kind: OutcomeKind
    order_lines: Optional[Tuple[OrderLine, ...]] = None                 # 🧾 None → сервіс не повідомив нове замовлення
    message: Optional[str] = None

    @classmethod
    def success(cls, order_lines: Optional[Sequence[OrderLine]] = None) -> "MutationOutcome":
        lines = tuple(order_lines) if order_lines is not None else None
        return cls(kind=OutcomeKind.SUCCESS, order_lines=lines)

    @classmethod
    def error(cls, message: str) -> "MutationOutcome":
        return cls(kind=OutcomeKind.ERROR, message=message)

    @property
    def is_error(self) -> bool:
        return self.kind is OutcomeKind.ERROR


class IOrderMutationService(Protocol):
    async def add_line(self, merchandise_id: str, quantity: int) -> MutationOutcome:
        """Додає рядок до замовлення; збої повертаються як `MutationOutcome.error`."""
        ...


__all__ = [
    "ICatalogQuery",
    "IOrderMutationService",
    "MutationOutcome",
    "OutcomeKind",
]
