# 🌍 checkout_upsell/domain/locale/__init__.py
"""🌍 Регіон каталогу за валютою/мовою checkout-у."""

from .region_resolver import (
    DEFAULT_REGION,
    RegionCode,
    normalize_currency,
    normalize_language,
    resolve_region,
)

__all__ = [
    "DEFAULT_REGION",
    "RegionCode",
    "normalize_currency",
    "normalize_language",
    "resolve_region",
]
