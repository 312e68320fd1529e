# 📜 checkout_upsell/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Виносять розпізнавання httpx/JSON-збоїв із клієнта Storefront.
🔹 Нові стратегії додаються без змін у `convert_error`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)

# 🔠 Системні імпорти
import asyncio
import json
import logging
from typing import Iterable, Optional, Protocol, Sequence

# 🧩 Внутрішні модулі проєкту
from .custom_errors import AppError, MalformedPayloadError, NetworkRequestError


logger = logging.getLogger("checkout_upsell.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorHandlingStrategy):
    """🌐 Перетворює httpx-помилки на `NetworkRequestError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, httpx.TimeoutException):					# ⏱️ Таймаути запиту
            url = self._url_of(error)
            logger.debug("⏱️ httpx timeout", extra={"url": url})
            return NetworkRequestError("Storefront request timed out", url=url, details=str(error))

        if isinstance(error, httpx.HTTPStatusError):					# 🔢 Неочікуваний статус
            url = self._url_of(error)
            status = error.response.status_code
            logger.debug("🔢 httpx status error", extra={"url": url, "status": status})
            return NetworkRequestError(
                f"Storefront responded with HTTP {status}",
                url=url,
                status_code=status,
                details=str(error),
            )

        if isinstance(error, httpx.HTTPError):							# 🌐 Решта транспортних збоїв
            url = self._url_of(error)
            logger.debug("🌐 httpx transport error", extra={"url": url})
            return NetworkRequestError("Storefront is unreachable", url=url, details=str(error))
        return None

    @staticmethod
    def _url_of(error: Exception) -> str:
        try:
            return str(error.request.url)								# type: ignore[attr-defined]
        except (AttributeError, RuntimeError):							# ⚠️ httpx кидає RuntimeError, якщо request не привʼязано
            return "N/A"


# ================================
# 📄 PAYLOAD-СТРАТЕГІЯ
# ================================
class PayloadErrorStrategy(IErrorHandlingStrategy):
    """📄 Некоректне тіло відповіді (не JSON, відсутні ключі, неправильні типи)."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, json.JSONDecodeError):
            logger.debug("📄 invalid JSON body")
            return MalformedPayloadError("Storefront returned a non-JSON body", details=str(error))
        if isinstance(error, (KeyError, TypeError, ValueError)):
            logger.debug("📄 malformed payload", extra={"exc_type": type(error).__name__})
            return MalformedPayloadError("Storefront returned a malformed payload", details=repr(error))
        return None


DEFAULT_STRATEGIES: Sequence[IErrorHandlingStrategy] = (HttpxErrorStrategy(), PayloadErrorStrategy())


def convert_error(
    error: Exception,
    strategies: Iterable[IErrorHandlingStrategy] = DEFAULT_STRATEGIES,
) -> AppError:
    """
    🔄 Пропускає виняток через стратегії й повертає `AppError`.

    `AppError` повертається як є; нерозпізнаний виняток загортається в `AppError`.
    `asyncio.CancelledError` ніколи не конвертується.
    """
    if isinstance(error, asyncio.CancelledError):
        raise error
    if isinstance(error, AppError):
        return error
    for strategy in strategies:
        converted = strategy.handle(error)
        if converted is not None:
            logger.debug("🔁 Strategy converted error via %r", strategy)
            return converted
    logger.debug("❓ No strategy matched %s", type(error).__name__)
    return AppError(f"Unexpected error: {type(error).__name__}", details=str(error))


__all__ = [
    "IErrorHandlingStrategy",
    "HttpxErrorStrategy",
    "PayloadErrorStrategy",
    "DEFAULT_STRATEGIES",
    "convert_error",
]
