# 🏛️ checkout_upsell/domain/__init__.py
"""🏛️ Доменний шар: регіони, сутності пропозицій, чисті сервіси вибору."""
