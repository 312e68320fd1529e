# 🌍 checkout_upsell/domain/locale/region_resolver.py
"""
🌍 Визначення регіону каталогу за валютою та мовою checkout-у.

🔹 Фіксована таблиця пріоритетів, перше співпадіння перемагає.
🔹 Функція тотальна: будь-яка пара (валюта, мова) дає рівно один `RegionCode`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from enum import Enum
from typing import Optional


logger = logging.getLogger(__name__)


class RegionCode(str, Enum):
    """Регіони, у контексті яких запитується каталог."""

    FR = "FR"
    DE = "DE"
    CA = "CA"
    US = "US"


DEFAULT_REGION = RegionCode.US


def normalize_currency(currency: Optional[str]) -> str:
    """'eur ' → 'EUR'; None → ''."""
    return (currency or "").strip().upper()


def normalize_language(language: Optional[str]) -> str:
    """
    Приводить тег мови до вигляду `ll-RR` ('fr_fr' → 'fr-FR', 'EN' → 'en').
    """
    raw = (language or "").strip().replace("_", "-")
    if not raw:
        return ""
    lang, _, region = raw.partition("-")
    return f"{lang.lower()}-{region.upper()}" if region else lang.lower()


def resolve_region(currency: Optional[str], language: Optional[str]) -> RegionCode:
    """
    💱 → 🌍 Повертає регіон каталогу.

    1. EUR + fr-FR → FR
    2. EUR (будь-яка інша мова) → DE
    3. CAD → CA
    4. інакше → US
    """
    currency_code = normalize_currency(currency)
    language_tag = normalize_language(language)

    if currency_code == "EUR":
        region = RegionCode.FR if language_tag == "fr-FR" else RegionCode.DE
    elif currency_code == "CAD":
        region = RegionCode.CA
    else:
        region = DEFAULT_REGION

    logger.debug("🌍 resolve_region(%r, %r) → %s", currency, language, region.value)
    return region


__all__ = ["RegionCode", "DEFAULT_REGION", "normalize_currency", "normalize_language", "resolve_region"]
