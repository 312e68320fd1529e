# 🧰 checkout_upsell/shared/utils/__init__.py
"""
🧰 Пакет спільних утиліт: логування та незмінні структури.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    get_logger,
    init_logging,
    init_logging_from_config,
)

# 🧊 Незмінні структури
from .immutables import freeze

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "freeze",
]
