# 🧭 checkout_upsell/upsell/state.py
"""
🧭 Стан віджета, видимий шару рендерингу.

🔹 `UpsellFlags` - єдиний мутабельний запис ядра. Кожне поле має рівно одного власника:
    `loading` → CatalogFetcher, `adding` → CartMutationController, `show_error` → ErrorBanner.
🔹 `RenderState` - незмінний знімок для презентаційного шару.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.domain.offers.entities import OfferCandidate


ChangeListener = Callable[[], None]


@dataclass
class UpsellFlags:
    loading: bool = False                                               # 📚 Запит каталогу в польоті
    adding: bool = False                                                # 🛒 Мутація в польоті
    show_error: bool = False                                            # 🚨 Банер помилки (тимчасовий)


class ViewMode(str, Enum):
    """Що саме має намалювати презентаційний шар."""

    LOADING = "loading"                                                 # 💀 Скелетон + неактивна кнопка
    HIDDEN = "hidden"                                                   # 🙈 Нічого не показуємо
    OFFER = "offer"                                                     # 🎁 Картка пропозиції


@dataclass(frozen=True, slots=True)
class RenderState:
    """🖼️ Знімок усього, що потрібно рендереру."""

    view: ViewMode
    loading: bool
    adding: bool
    show_error: bool
    offer: Optional[OfferCandidate]
    formatted_price: Optional[str]
    image_url: Optional[str]
    labels: Mapping[str, str]

    @property
    def can_add(self) -> bool:
        """Кнопку можна натискати лише для показаної пропозиції поза польотом мутації."""
        return self.view is ViewMode.OFFER and not self.adding


def notify(listener: Optional[ChangeListener]) -> None:
    if listener is not None:
        listener()


__all__ = ["ChangeListener", "UpsellFlags", "ViewMode", "RenderState", "notify"]
