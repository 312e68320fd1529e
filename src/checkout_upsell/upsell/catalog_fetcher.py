# 📚 checkout_upsell/upsell/catalog_fetcher.py
"""
📚 CatalogFetcher: один регіональний запит кандидатів на активацію.

🔹 Власник `UpsellFlags.loading`: True на час запиту, False після будь-якого завершення.
🔹 Успіх → зберігаємо список (може бути порожнім), лише придатні до покупки кандидати.
🔹 Збій → лог + метрика, попередній список лишається; виняток назовні не йде.
🔹 Кожен запит має номер покоління: результат застарілого запиту не перезаписує новіший.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import time
from typing import Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.domain.locale.region_resolver import RegionCode
from checkout_upsell.domain.offers.entities import OfferCandidate
from checkout_upsell.domain.offers.interfaces import ICatalogQuery
from checkout_upsell.errors.strategies import convert_error
from checkout_upsell.infrastructure.metrics import UPSELL_FETCH_LATENCY, UPSELL_FETCH_TOTAL
from checkout_upsell.shared.utils.logger import get_logger
from .state import ChangeListener, UpsellFlags, notify

logger = get_logger("fetcher")


class CatalogFetcher:
    """📚 Тягне кандидатів і керує життєвим циклом `loading`."""

    def __init__(
        self,
        catalog: ICatalogQuery,
        flags: UpsellFlags,
        *,
        batch_size: int = CONST.LOGIC.BATCH_SIZE,
        on_change: Optional[ChangeListener] = None,
    ) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self._catalog = catalog
        self._flags = flags
        self._batch_size = int(batch_size)
        self._on_change = on_change
        self._candidates: Tuple[OfferCandidate, ...] = ()
        self._generation = 0
        self._last_region: Optional[RegionCode] = None

    @property
    def candidates(self) -> Tuple[OfferCandidate, ...]:
        return self._candidates

    @property
    def last_region(self) -> Optional[RegionCode]:
        return self._last_region

    async def fetch(self, region: RegionCode) -> Tuple[OfferCandidate, ...]:
        """
        Виконує запит для `region` і повертає актуальний список кандидатів.
        Ніколи не піднімає винятків, окрім `asyncio.CancelledError`.
        """
        self._generation += 1
        generation = self._generation
        self._last_region = region
        self._flags.loading = True
        logger.info("📚 Fetch #%d: region=%s batch=%d", generation, region.value, self._batch_size)
        notify(self._on_change)

        started = time.perf_counter()
        try:
            offers = await self._catalog.fetch_offers(region, self._batch_size)
        except asyncio.CancelledError:
            logger.info("⏹️ Fetch #%d скасовано", generation)
            raise
        except Exception as exc:  # noqa: BLE001  # віджет деградує до «нічого не показувати»
            error = convert_error(exc)
            UPSELL_FETCH_TOTAL.labels(outcome="failure").inc()
            logger.error("❌ Fetch #%d не вдався: %s", generation, error, extra=error.to_log_extra())
        else:
            UPSELL_FETCH_TOTAL.labels(outcome="success").inc()
            if generation == self._generation:
                self._candidates = tuple(offer for offer in offers or () if offer.is_purchasable)
                logger.info("✅ Fetch #%d: %d кандидатів", generation, len(self._candidates))
            else:
                logger.debug("🕰️ Fetch #%d застарів (актуальний #%d), результат відкинуто", generation, self._generation)
        finally:
            UPSELL_FETCH_LATENCY.observe(time.perf_counter() - started)
            if generation == self._generation:
                self._flags.loading = False
                notify(self._on_change)
        return self._candidates


__all__ = ["CatalogFetcher"]
