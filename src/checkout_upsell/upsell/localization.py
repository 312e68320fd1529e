# 🌐 checkout_upsell/upsell/localization.py
"""
🌐 Локалізація віджета: переклад лейблів і форматування ціни.

🔹 Переклади лежать у `checkout_upsell/locales/<lang>.yaml` і кешуються.
🔹 Ланцюжок фолбеків: повний тег (`fr-CA`) → базова мова (`fr`) → `en` → сам ключ.
🔹 Ціна: Decimal, квантування до центів (ROUND_HALF_UP), символ валюти та роздільники мови.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                         # 📦 YAML-файли перекладів

# 🔠 Системні імпорти
from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Final, List, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.domain.locale.region_resolver import normalize_language
from checkout_upsell.domain.offers.entities import Money
from checkout_upsell.shared.utils.logger import get_logger

logger = get_logger("i18n")

_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"

_CENT: Final[Decimal] = Decimal("0.01")
_NBSP: Final[str] = "\u00a0"
_CURRENCY_SYMBOLS: Final[Dict[str, str]] = {
    "USD": "$",
    "EUR": "€",
    "CAD": "CA$",
    "GBP": "£",
}
# мова → (роздільник тисяч, десятковий роздільник, символ попереду?)
_NUMBER_STYLES: Final[Dict[str, Tuple[str, str, bool]]] = {
    "en": (",", ".", True),
    "fr": ("\u202f", ",", False),
    "de": (".", ",", False),
}


@lru_cache(maxsize=None)
def load_translations(lang: str) -> Mapping[str, str]:
    """📅 Зчитує `<lang>.yaml`; відсутній файл → порожня мапа."""
    file_path = _LOCALES_DIR / f"{lang}.yaml"
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.debug("ℹ️ Переклад %s відсутній", file_path.name)
        return MappingProxyType({})
    if not isinstance(data, dict):
        logger.warning("⚠️ %s не містить словника перекладів", file_path.name)
        return MappingProxyType({})
    return MappingProxyType({str(key): str(value) for key, value in data.items()})


def language_chain(language: Optional[str], default: str = CONST.LOGIC.DEFAULT_LANGUAGE) -> List[str]:
    """'fr-CA' → ['fr-CA', 'fr', 'en'] (без дублікатів)."""
    tag = normalize_language(language)
    chain: List[str] = []
    for candidate in (tag, tag.partition("-")[0], default):
        if candidate and candidate not in chain:
            chain.append(candidate)
    return chain


class Localizer:
    """🌐 Переклади й формат ціни для однієї мови checkout-у."""

    def __init__(self, language: Optional[str]) -> None:
        self._language = normalize_language(language) or CONST.LOGIC.DEFAULT_LANGUAGE
        self._chain = language_chain(self._language)

    @property
    def language(self) -> str:
        return self._language

    def translate(self, key: str, **params: str) -> str:
        template = key
        for lang in self._chain:
            translations = load_translations(lang)
            if key in translations:
                template = translations[key]
                break
        else:
            logger.warning("⚠️ Немає перекладу для '%s' (%s)", key, self._language)
        try:
            return template.format(**params) if params else template
        except (KeyError, IndexError):
            logger.warning("⚠️ Некоректні параметри для '%s': %s", key, sorted(params))
            return template

    def format_price(self, money: Money) -> str:
        """
        Форматує суму з урахуванням валюти та мови:
        en → `$1,234.50`, fr → `1 234,50 €`, de → `1.234,50 €`.
        """
        base = self._language.partition("-")[0]
        thousands, decimal_sep, symbol_first = _NUMBER_STYLES.get(base, _NUMBER_STYLES["en"])

        amount = money.amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 else ""
        raw = f"{abs(amount):,.2f}"                                 # 🔢 '1,234.50'
        number = raw.replace(",", "\x00").replace(".", decimal_sep).replace("\x00", thousands)

        symbol = _CURRENCY_SYMBOLS.get(money.currency_code)
        if symbol is None:                                          # 🏷️ Невідома валюта → ISO-код через пробіл
            return f"{sign}{money.currency_code}{_NBSP}{number}" if symbol_first else f"{sign}{number}{_NBSP}{money.currency_code}"
        if symbol_first:
            return f"{sign}{symbol}{number}"
        return f"{sign}{number}{_NBSP}{symbol}"


__all__ = ["Localizer", "language_chain", "load_translations"]
