# 🎯 checkout_upsell/domain/offers/services.py
"""
🎯 Чисті функції синхронізації з кошиком та вибору пропозиції.

🔹 `filter_candidates` - стабільний фільтр: прибирає кандидатів, чия одиниця вже в замовленні.
🔹 `select_offer` - перший кандидат або None; порядок каталогу авторитетний.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from .entities import OfferCandidate, OrderLine


logger = logging.getLogger(__name__)


def merchandise_ids(order_lines: Iterable[OrderLine]) -> FrozenSet[str]:
    """Множина id одиниць, уже присутніх у замовленні."""
    return frozenset(line.merchandise_id for line in order_lines or ())


def filter_candidates(
    candidates: Sequence[OfferCandidate],
    order_lines: Iterable[OrderLine],
) -> Tuple[OfferCandidate, ...]:
    """
    Прибирає кандидатів без одиниць товару та тих, чия одиниця вже в замовленні.
    Відносний порядок решти зберігається.
    """
    in_order = merchandise_ids(order_lines)
    remaining = tuple(
        candidate
        for candidate in candidates or ()
        if candidate.is_purchasable and candidate.merchandise_id not in in_order
    )
    logger.debug(
        "🛒 filter_candidates: %d → %d (в замовленні %d одиниць)",
        len(candidates or ()),
        len(remaining),
        len(in_order),
    )
    return remaining


def select_offer(candidates: Sequence[OfferCandidate]) -> Optional[OfferCandidate]:
    """Перший елемент відфільтрованої послідовності або None."""
    return candidates[0] if candidates else None


__all__ = ["merchandise_ids", "filter_candidates", "select_offer"]
