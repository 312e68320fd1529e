# 🛒 checkout_upsell/upsell/mutation_controller.py
"""
🛒 CartMutationController: додавання обраної пропозиції в замовлення.

Стан: `idle → adding → idle | idle + show_error`.

🔹 `adding=True` ставиться синхронно до запиту й скидається у `finally` за будь-якого результату.
🔹 Помилка → лог діагностики + `ErrorBanner.show()`; автоматичних повторів немає.
🔹 Успіх → `ErrorBanner.dismiss()` і публікація нового замовлення.
🔹 Контролер не ставить запити в чергу: перевірка `adding` - обовʼязок викликача.
🔹 Після `close()` результат запиту в польоті лише логується: без банера й без публікації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
from typing import Callable, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.domain.offers.entities import OfferCandidate, OrderLine
from checkout_upsell.domain.offers.interfaces import IOrderMutationService, MutationOutcome
from checkout_upsell.errors.custom_errors import MutationError
from checkout_upsell.errors.strategies import convert_error
from checkout_upsell.infrastructure.metrics import UPSELL_ADD_TOTAL
from checkout_upsell.shared.utils.logger import get_logger
from .error_banner import ErrorBanner
from .state import ChangeListener, UpsellFlags, notify

logger = get_logger("mutation")

OrderListener = Callable[[Sequence[OrderLine]], None]


class CartMutationController:
    """🛒 Власник `UpsellFlags.adding`."""

    def __init__(
        self,
        service: IOrderMutationService,
        flags: UpsellFlags,
        banner: ErrorBanner,
        *,
        quantity: int = CONST.LOGIC.ADD_QUANTITY,
        on_change: Optional[ChangeListener] = None,
        on_order_updated: Optional[OrderListener] = None,
    ) -> None:
        self._service = service
        self._flags = flags
        self._banner = banner
        self._quantity = int(quantity)
        self._on_change = on_change
        self._on_order_updated = on_order_updated
        self._closed = False

    @property
    def adding(self) -> bool:
        return self._flags.adding

    def close(self) -> None:
        """🧹 Демонтаж: результати запитів, що ще в польоті, більше не впливають на стан."""
        self._closed = True

    async def submit(self, offer: OfferCandidate) -> MutationOutcome:
        """
        Надсилає `add_line` для одиниці товару `offer`.

        Raises:
            ValueError: у пропозиції немає жодної одиниці товару.
        """
        merchandise_id = offer.merchandise_id
        if merchandise_id is None:
            raise ValueError(f"Offer {offer.id} has no purchasable unit")

        self._flags.adding = True
        logger.info("🛒 Додаємо %s (offer=%s, qty=%d)", merchandise_id, offer.id, self._quantity)
        notify(self._on_change)
        try:
            outcome = await self._service.add_line(merchandise_id, self._quantity)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001  # порушений контракт сервісу → звичайний error-результат
            outcome = MutationOutcome.error(convert_error(exc).message)
        finally:
            self._flags.adding = False
            notify(self._on_change)

        if self._closed:
            logger.info(
                "🧹 Віджет демонтовано, результат для %s проігноровано (%s)",
                merchandise_id,
                outcome.kind.value,
            )
            return outcome

        if outcome.is_error:
            error = MutationError(
                outcome.message or "Unknown cart mutation error",
                merchandise_id=merchandise_id,
            )
            UPSELL_ADD_TOTAL.labels(outcome="failure").inc()
            logger.error("❌ Не вдалося додати %s: %s", merchandise_id, error, extra=error.to_log_extra())
            self._banner.show()
            return outcome

        UPSELL_ADD_TOTAL.labels(outcome="success").inc()
        logger.info("✅ %s додано в замовлення", merchandise_id)
        self._banner.dismiss()
        if outcome.order_lines is not None and self._on_order_updated is not None:
            self._on_order_updated(outcome.order_lines)
        return outcome


__all__ = ["CartMutationController", "OrderListener"]
