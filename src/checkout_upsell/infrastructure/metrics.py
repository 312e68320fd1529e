# 📈 checkout_upsell/infrastructure/metrics.py
"""
📈 Prometheus-метрики upsell-віджета.

🔹 `UPSELL_FETCH_TOTAL{outcome}` - результати запитів каталогу (success/failure).
🔹 `UPSELL_ADD_TOTAL{outcome}` - результати додавання пропозиції в замовлення.
🔹 `UPSELL_FETCH_LATENCY` - гістограма тривалості запиту каталогу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram                      # 📊 Prometheus-метрики

UPSELL_FETCH_TOTAL = Counter(
    "upsell_catalog_fetch_total",
    "Catalog fetches for upsell candidates",
    ["outcome"],
)

UPSELL_ADD_TOTAL = Counter(
    "upsell_add_to_cart_total",
    "Add-to-order attempts for the selected upsell offer",
    ["outcome"],
)

UPSELL_FETCH_LATENCY = Histogram(
    "upsell_catalog_fetch_seconds",
    "Time to fetch upsell candidates",
)


__all__ = [
    "UPSELL_FETCH_TOTAL",
    "UPSELL_ADD_TOTAL",
    "UPSELL_FETCH_LATENCY",
]
