# 📖 checkout_upsell/config/setup/constants.py
"""
📖 Типобезпечні константи upsell-віджета.

🔹 Централізує дефолти, які дублюються у `config.yaml`.
🔹 Гарантує імутабельність через `dataclass(slots=True, frozen=True)`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from typing import Final


# ================================
# 🛒 ЛОГІКА ВІДЖЕТА
# ================================
@dataclass(frozen=True, slots=True)
class _UpsellLogic:
    """Параметри запиту каталогу та життєвого циклу банера помилки."""

    BATCH_SIZE: Final[int] = 5                                          # 📦 Скільки кандидатів тягнемо з каталогу
    QUERY_TAG: Final[str] = "UPSELL"                                    # 🏷️ Тег товарів, придатних до upsell
    ERROR_DISMISS_SEC: Final[float] = 3.0                               # ⏱️ Час життя банера помилки
    ADD_QUANTITY: Final[int] = 1                                        # ➕ Кількість у мутації
    DEFAULT_LANGUAGE: Final[str] = "en"
    PLACEHOLDER_IMAGE_URL: Final[str] = (
        "https://cdn.shopify.com/s/files/1/0533/2089/files/"
        "placeholder-images-image_medium.png?format=webp&v=1530129081"
    )


# ================================
# 🌐 STOREFRONT API
# ================================
@dataclass(frozen=True, slots=True)
class _Storefront:
    TOKEN_HEADER: Final[str] = "X-Shopify-Storefront-Access-Token"
    TIMEOUT_SEC: Final[float] = 10.0


@dataclass(frozen=True, slots=True)
class AppConstants:
    """Кореневий контейнер констант."""

    LOGIC: _UpsellLogic = _UpsellLogic()
    STOREFRONT: _Storefront = _Storefront()


CONST: Final[AppConstants] = AppConstants()                             # 🧷 Глобальний екземпляр

__all__ = ["AppConstants", "CONST"]
