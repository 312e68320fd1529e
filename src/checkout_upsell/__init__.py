# 🛒 checkout_upsell/__init__.py
"""
🛒 checkout_upsell: ядро upsell-віджета для checkout-у.

🔹 Визначає регіон каталогу, тягне кандидатів, відсіює вже додані в замовлення.
🔹 Обирає одну пропозицію та додає її в замовлення з тимчасовим банером помилки.
"""

__version__ = "0.1.0"
