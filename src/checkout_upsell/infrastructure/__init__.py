# 🏗️ checkout_upsell/infrastructure/__init__.py
"""🏗️ Адаптери зовнішніх сервісів (Storefront API) та метрики."""
