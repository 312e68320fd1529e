# 🚨 checkout_upsell/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків upsell-віджета.

🔹 `AppError` - корінь ієрархії; `UserVisibleError` - те, що доходить до покупця.
🔹 `StorefrontError` (транспорт/payload) → `CatalogFetchError` відновлюється локально (віджет просто нічого не показує).
🔹 `MutationError` показується покупцю тимчасовим банером.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Dict, Optional


logger = logging.getLogger("checkout_upsell.errors.custom_errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """Коди для полів `error_code` у логах."""

    CATALOG = "catalog_fetch_error"
    PAYLOAD = "malformed_payload"
    MUTATION = "cart_mutation_error"
    NETWORK = "network_error"
    UNKNOWN = "unknown_error"


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток пакета з опційними технічними деталями."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.*(extra=...)`."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, текст якої можна показати покупцю."""


# ================================
# 🌐 STOREFRONT (ТРАНСПОРТ І PAYLOAD)
# ================================
class StorefrontError(AppError):
    """🌐 Збій запиту до Storefront API (транспорт, HTTP-статус, тіло відповіді)."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.url = url
        self.status_code = status_code

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


class NetworkRequestError(StorefrontError):
    """🌐 Таймаут, відмова зʼєднання або неочікуваний HTTP-статус."""

    code = ErrorCode.NETWORK


class MalformedPayloadError(StorefrontError):
    """📄 Тіло відповіді не JSON, містить `errors` або не має очікуваних полів."""

    code = ErrorCode.PAYLOAD


# ================================
# 📚 КАТАЛОГ
# ================================
class CatalogFetchError(StorefrontError):
    """📚 Запит каталогу не вдався або повернув некоректні дані."""

    code = ErrorCode.CATALOG


# ================================
# 🛒 МУТАЦІЯ КОШИКА
# ================================
class MutationError(UserVisibleError):
    """🛒 Додавання рядка до замовлення не вдалося."""

    code = ErrorCode.MUTATION

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        merchandise_id: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.merchandise_id = merchandise_id

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.merchandise_id:
            extra["merchandise_id"] = self.merchandise_id
        return extra


__all__ = [
    "ErrorCode",
    "AppError",
    "UserVisibleError",
    "StorefrontError",
    "NetworkRequestError",
    "MalformedPayloadError",
    "CatalogFetchError",
    "MutationError",
]
