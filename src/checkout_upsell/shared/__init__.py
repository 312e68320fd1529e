# 🧰 checkout_upsell/shared/__init__.py
"""🧰 Спільні утиліти пакета (логування, незмінні структури)."""
