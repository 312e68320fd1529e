# 📦 checkout_upsell/domain/offers/entities.py
"""
📦 Доменно-чисті сутності upsell-пропозицій та рядків замовлення.

🔹 Усі сутності іммʼютабельні (frozen dataclass + slots).
🔹 Гроші лише як Decimal; код валюти нормалізується до ISO-4217 у верхньому регістрі.
🔹 `OfferCandidate` без жодної одиниці товару вважається непридатним (`is_purchasable`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Tuple


logger = logging.getLogger(__name__)


def _require_id(value: Any, what: str) -> str:
    """Непорожній рядковий ідентифікатор або ValueError."""
    normalized = str(value or "").strip()
    if not normalized:
        logger.error("❌ %s: порожній ідентифікатор", what)
        raise ValueError(f"{what} id must be a non-empty string")
    return normalized


# ================================
# 💵 VALUE OBJECT: MONEY
# ================================
@dataclass(frozen=True, slots=True)
class Money:
    """💵 Сума + код валюти."""

    amount: Decimal
    currency_code: str

    def __post_init__(self) -> None:
        try:
            amount = self.amount if isinstance(self.amount, Decimal) else Decimal(str(self.amount))
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"Money amount is not numeric: {self.amount!r}") from exc
        if not amount.is_finite():
            raise ValueError(f"Money amount must be finite: {self.amount!r}")
        code = str(self.currency_code or "").strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Currency code must be ISO-4217: {self.currency_code!r}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency_code", code)


# ================================
# 🧩 ОДИНИЦЯ ТОВАРУ (VARIANT)
# ================================
@dataclass(frozen=True, slots=True)
class PurchasableUnit:
    """🧩 Конкретний варіант, який можна покласти в замовлення."""

    id: str
    price: Money

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _require_id(self.id, "PurchasableUnit"))


# ================================
# 🎁 КАНДИДАТ НА UPSELL
# ================================
@dataclass(frozen=True, slots=True)
class OfferCandidate:
    """
    🎁 Товар із каталогу, придатний до показу як upsell.

    `units` містить щонайбільше одну репрезентативну одиницю (перший варіант).
    """

    id: str
    title: str
    image_url: Optional[str] = None
    units: Tuple[PurchasableUnit, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _require_id(self.id, "OfferCandidate"))
        object.__setattr__(self, "title", str(self.title or "").strip())
        image = (self.image_url or "").strip() or None
        object.__setattr__(self, "image_url", image)
        object.__setattr__(self, "units", tuple(self.units or ()))

    @property
    def unit(self) -> Optional[PurchasableUnit]:
        """Репрезентативна одиниця або None, якщо варіантів немає."""
        return self.units[0] if self.units else None

    @property
    def is_purchasable(self) -> bool:
        return bool(self.units)

    @property
    def merchandise_id(self) -> Optional[str]:
        unit = self.unit
        return unit.id if unit else None

    @property
    def price(self) -> Optional[Money]:
        unit = self.unit
        return unit.price if unit else None


# ================================
# 🧾 РЯДОК ЗАМОВЛЕННЯ
# ================================
@dataclass(frozen=True, slots=True)
class OrderLine:
    """🧾 Знімок одного рядка поточного замовлення (лише читання)."""

    merchandise_id: str
    quantity: int = 1
    line_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "merchandise_id", _require_id(self.merchandise_id, "OrderLine"))


OrderSnapshot = Tuple[OrderLine, ...]


def snapshot_of(lines: Iterable[OrderLine]) -> OrderSnapshot:
    """Фіксує довільну колекцію рядків як незмінний знімок."""
    return tuple(lines or ())


__all__ = [
    "Money",
    "PurchasableUnit",
    "OfferCandidate",
    "OrderLine",
    "OrderSnapshot",
    "snapshot_of",
]
