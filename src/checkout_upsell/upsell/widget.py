# 🎁 checkout_upsell/upsell/widget.py
"""
🎁 UpsellWidget: фасад ядра, який вбудовується в checkout-хост.

Потік даних:
    валюта/мова → регіон → CatalogFetcher → CartSynchronizer (на кожен знімок замовлення)
    → вибір → RenderState для презентаційного шару.

🔹 `activate()` - один запит каталогу на активацію; повторна активація нічого не робить.
🔹 `set_locale()` - перерахунок регіону; новий регіон → новий запит каталогу.
🔹 `press_add()` - охоронець `adding` і `loading`: поки мутація або запит каталогу в польоті, натискання ігнорується.
🔹 `render()` - незмінний знімок стану; `subscribe()` - сповіщення про зміни.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Callable, List, Optional

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.domain.locale.region_resolver import RegionCode, resolve_region
from checkout_upsell.domain.offers.entities import OfferCandidate
from checkout_upsell.domain.offers.interfaces import ICatalogQuery, IOrderMutationService, MutationOutcome
from checkout_upsell.shared.utils.immutables import freeze
from checkout_upsell.shared.utils.logger import get_logger
from .cart_synchronizer import CartSynchronizer
from .catalog_fetcher import CatalogFetcher
from .error_banner import ErrorBanner
from .localization import Localizer
from .mutation_controller import CartMutationController
from .order_snapshot import OrderSnapshotFeed
from .state import RenderState, UpsellFlags, ViewMode

logger = get_logger("widget")

RenderListener = Callable[[RenderState], None]


class UpsellWidget:
    """🎁 Зводить докупи регіон, каталог, синхронізацію з кошиком і мутацію."""

    def __init__(
        self,
        *,
        catalog: ICatalogQuery,
        order_service: IOrderMutationService,
        order_feed: OrderSnapshotFeed,
        currency: str,
        language: str,
        batch_size: int = CONST.LOGIC.BATCH_SIZE,
        error_dismiss_sec: float = CONST.LOGIC.ERROR_DISMISS_SEC,
        placeholder_image_url: str = CONST.LOGIC.PLACEHOLDER_IMAGE_URL,
    ) -> None:
        self.flags = UpsellFlags()
        self._order_feed = order_feed
        self._placeholder_image_url = placeholder_image_url
        self._listeners: List[RenderListener] = []
        self._activated = False
        self._closed = False

        self._currency = currency
        self._language = language
        self._region = resolve_region(currency, language)
        self._localizer = Localizer(language)

        self._sync = CartSynchronizer(order_feed, lambda: self._fetcher.candidates, on_change=self._emit)
        self._fetcher = CatalogFetcher(catalog, self.flags, batch_size=batch_size, on_change=self._sync.recompute)
        self._banner = ErrorBanner(self.flags, dismiss_after_sec=error_dismiss_sec, on_change=self._emit)
        self._mutation = CartMutationController(
            order_service,
            self.flags,
            self._banner,
            on_change=self._emit,
            on_order_updated=order_feed.publish,
        )
        logger.debug("🎁 UpsellWidget створено: currency=%s language=%s region=%s", currency, language, self._region.value)

    # ================================
    # 🔓 ВЛАСТИВОСТІ
    # ================================
    @property
    def region(self) -> RegionCode:
        return self._region

    @property
    def activated(self) -> bool:
        return self._activated

    @property
    def selection(self) -> Optional[OfferCandidate]:
        return self._sync.selection

    # ================================
    # 🚀 ЖИТТЄВИЙ ЦИКЛ
    # ================================
    async def activate(self) -> None:
        """Підписується на знімки замовлення й виконує єдиний запит каталогу."""
        if self._closed:
            logger.debug("🧹 Віджет закрито, активація пропущена")
            return
        if self._activated:
            logger.debug("ℹ️ Віджет уже активовано, повторний запит не виконується")
            return
        self._activated = True
        self._sync.attach()
        logger.info("🚀 Активація: language=%s region=%s", self._language, self._region.value)
        await self._refresh_catalog()

    async def set_locale(self, currency: str, language: str) -> None:
        """Оновлює валюту/мову; при зміні регіону повторює запит каталогу."""
        self._currency = currency
        self._language = language
        self._localizer = Localizer(language)
        region = resolve_region(currency, language)
        if region is self._region:
            self._emit()
            return
        logger.info("🌍 Регіон змінено: %s → %s", self._region.value, region.value)
        self._region = region
        if self._activated:
            await self._refresh_catalog()
        else:
            self._emit()

    async def close(self) -> None:
        """🧹 Демонтаж: скасовує таймер банера й відʼєднує мутацію, що ще в польоті."""
        self._closed = True
        self._mutation.close()
        self._banner.close()
        self._sync.detach()
        self._listeners.clear()
        self._activated = False
        logger.debug("🧹 UpsellWidget закрито")

    # ================================
    # 🛒 ДІЯ ПОКУПЦЯ
    # ================================
    async def press_add(self) -> Optional[MutationOutcome]:
        """
        Натискання кнопки «Додати».

        Returns:
            MutationOutcome або None, якщо натискання проігноровано
            (віджет закрито, мутація чи запит каталогу в польоті, або пропозиції немає).
        """
        if self._closed:
            logger.debug("🧹 Віджет закрито, натискання проігноровано")
            return None
        if self.flags.adding:
            logger.debug("⏳ Мутація вже в польоті, натискання проігноровано")
            return None
        if self.flags.loading:
            logger.debug("⏳ Каталог оновлюється, натискання проігноровано")
            return None
        offer = self._sync.selection
        if offer is None:
            logger.debug("🙈 Немає пропозиції для додавання")
            return None
        return await self._mutation.submit(offer)

    # ================================
    # 🖼️ РЕНДЕРИНГ
    # ================================
    def render(self) -> RenderState:
        offer = None if self.flags.loading else self._sync.selection
        if self.flags.loading:
            view = ViewMode.LOADING
        elif offer is None:
            view = ViewMode.HIDDEN
        else:
            view = ViewMode.OFFER

        labels = {
            "heading": self._localizer.translate("you_might_also_like"),
            "add": self._localizer.translate("add"),
            "error_banner": self._localizer.translate("error_banner"),
        }
        formatted_price = None
        image_url = None
        if offer is not None:
            labels["add_accessibility"] = self._localizer.translate("add_accessibility", title=offer.title)
            price = offer.price
            formatted_price = self._localizer.format_price(price) if price is not None else None
            image_url = offer.image_url or self._placeholder_image_url

        return RenderState(
            view=view,
            loading=self.flags.loading,
            adding=self.flags.adding,
            show_error=self.flags.show_error,
            offer=offer,
            formatted_price=formatted_price,
            image_url=image_url,
            labels=freeze(labels),
        )

    def subscribe(self, listener: RenderListener) -> Callable[[], None]:
        """Слухач отримує новий `RenderState` після кожної зміни стану."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ================================
    # 🛠️ ВНУТРІШНЄ
    # ================================
    async def _refresh_catalog(self) -> None:
        await self._fetcher.fetch(self._region)

    def _emit(self) -> None:
        if not self._listeners:
            return
        state = self.render()
        for listener in list(self._listeners):
            listener(state)


__all__ = ["UpsellWidget", "RenderListener"]
