# 📦 checkout_upsell/config/setup/container.py
"""
📦 Контейнер залежностей upsell-віджета.

🔹 Створює Storefront-адаптери з конфігурації
🔹 Складає UpsellWidget для конкретного кошика та checkout-контексту
🔹 Закриває HTTP-ресурси на демонтажі
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                             # 🌐 Спільний HTTP-клієнт (опційно)

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import Any, Iterable, Mapping, Optional                      # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.config_service import ConfigService          # ⚙️ Конфігурація
from checkout_upsell.config.setup.constants import CONST, AppConstants   # ⚙️ Глобальні константи
from checkout_upsell.domain.offers.entities import OrderLine             # 🧾 Рядки замовлення
from checkout_upsell.infrastructure.storefront import (                  # 🌐 Storefront-адаптери
    StorefrontCartService,
    StorefrontCatalogQuery,
    StorefrontClient,
)
from checkout_upsell.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування
from checkout_upsell.upsell.order_snapshot import OrderSnapshotFeed      # 🧾 Стрічка знімків замовлення
from checkout_upsell.upsell.widget import UpsellWidget                   # 🎁 Фасад віджета

logger = logging.getLogger(LOG_NAME)                                     # 🧾 Модульний логер контейнера


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """Повертає ціле число або запасне значення, якщо каст неможливий."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float_or_default(value: Any, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def bootstrap_logging(config: Optional[ConfigService] = None) -> logging.Logger:
    """Зчитує конфіг логування і запускає кореневий логер."""
    cfg = config or ConfigService()
    node = cfg.section("logging") or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Контейнер, що тримає спільний Storefront-клієнт і каталог,
    а віджети будує на кожен checkout (кошик + валюта + мова).
    """

    def __init__(
        self,
        config: ConfigService,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ):
        self.config = config                                              # ⚙️ Джерело конфігурацій DI
        self.constants: AppConstants = CONST                              # 🧱 Глобальні константи
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        for key, value in (overrides or {}).items():                      # ✏️ Налаштування від хоста checkout-у
            logger.debug("✏️ Перевизначення конфігу: %s", key)
            self.config.set(key, value)
        self._read_upsell_settings()
        self.storefront_client = StorefrontClient.from_config(config, client=http_client)
        self.catalog_query = StorefrontCatalogQuery(self.storefront_client, tag=self.query_tag)
        logger.info("✅ Контейнер ініціалізовано успішно")

    def _read_upsell_settings(self) -> None:
        logic = self.constants.LOGIC
        upsell = self.config.section("upsell") or {}
        self.batch_size = _int_or_default(upsell.get("batch_size"), logic.BATCH_SIZE)
        if self.batch_size <= 0:
            logger.warning("⚠️ upsell.batch_size=%s некоректний, використовуємо %d", self.batch_size, logic.BATCH_SIZE)
            self.batch_size = logic.BATCH_SIZE
        self.query_tag = str(upsell.get("query_tag") or logic.QUERY_TAG)
        self.error_dismiss_sec = _float_or_default(upsell.get("error_dismiss_sec"), logic.ERROR_DISMISS_SEC)
        if self.error_dismiss_sec < 0:
            self.error_dismiss_sec = logic.ERROR_DISMISS_SEC
        self.default_language = str(upsell.get("default_language") or logic.DEFAULT_LANGUAGE)
        self.placeholder_image_url = str(upsell.get("placeholder_image_url") or logic.PLACEHOLDER_IMAGE_URL)

    # ================================
    # 🎁 ФАБРИКА ВІДЖЕТІВ
    # ================================
    def build_widget(
        self,
        *,
        cart_id: str,
        currency: str,
        language: Optional[str] = None,
        order_lines: Iterable[OrderLine] = (),
        order_feed: Optional[OrderSnapshotFeed] = None,
    ) -> UpsellWidget:
        """
        Складає віджет для одного checkout-у.

        Якщо хост уже має власну `OrderSnapshotFeed`, передайте її; інакше
        буде створено нову з початковими `order_lines`.
        """
        feed = order_feed if order_feed is not None else OrderSnapshotFeed(order_lines)
        return UpsellWidget(
            catalog=self.catalog_query,
            order_service=StorefrontCartService(self.storefront_client, cart_id),
            order_feed=feed,
            currency=currency,
            language=language or self.default_language,
            batch_size=self.batch_size,
            error_dismiss_sec=self.error_dismiss_sec,
            placeholder_image_url=self.placeholder_image_url,
        )

    async def close(self) -> None:
        await self.storefront_client.close()
        logger.info("🧹 Контейнер закрито")


__all__ = ["Container", "bootstrap_logging"]
