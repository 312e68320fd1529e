# 🚨 checkout_upsell/upsell/error_banner.py
"""
🚨 ErrorBanner: одноразовий прапорець `show_error` з власним таймером.

🔹 `show()` піднімає прапорець і (пере)запускає таймер; попередній таймер скасовується.
🔹 Після `dismiss_after_sec` прапорець скидається сам; `dismiss()` скидає раніше.
🔹 `close()` скасовує таймер під час демонтажу; після нього `show()` нічого не робить.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.shared.utils.logger import get_logger
from .state import ChangeListener, UpsellFlags, notify

logger = get_logger("banner")


class ErrorBanner:
    """🚨 Власник `UpsellFlags.show_error`."""

    def __init__(
        self,
        flags: UpsellFlags,
        *,
        dismiss_after_sec: float = CONST.LOGIC.ERROR_DISMISS_SEC,
        on_change: Optional[ChangeListener] = None,
    ) -> None:
        if dismiss_after_sec < 0:
            raise ValueError("dismiss_after_sec must be >= 0")
        self._flags = flags
        self._delay = float(dismiss_after_sec)
        self._on_change = on_change
        self._timer: Optional[asyncio.TimerHandle] = None
        self._closed = False

    @property
    def visible(self) -> bool:
        return self._flags.show_error

    @property
    def timer_pending(self) -> bool:
        return self._timer is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def show(self) -> None:
        """Піднімає прапорець і запускає таймер заново (викликати всередині event loop)."""
        if self._closed:
            logger.debug("🧹 Банер уже закрито, показ пропущено")
            return
        loop = asyncio.get_running_loop()
        self._cancel_timer()
        self._flags.show_error = True
        self._timer = loop.call_later(self._delay, self._expire)
        logger.info("🚨 Банер помилки показано на %.2f с", self._delay)
        notify(self._on_change)

    def dismiss(self) -> None:
        """Скидає прапорець достроково (успішне додавання після помилки)."""
        self._cancel_timer()
        if self._flags.show_error:
            self._flags.show_error = False
            logger.debug("🧹 Банер помилки прибрано достроково")
            notify(self._on_change)

    def close(self) -> None:
        """🧹 Демонтаж: таймер більше не спрацює."""
        self._closed = True
        self._cancel_timer()
        self._flags.show_error = False

    def _expire(self) -> None:
        self._timer = None
        self._flags.show_error = False
        logger.debug("⏱️ Банер помилки сховано за таймером")
        notify(self._on_change)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


__all__ = ["ErrorBanner"]
