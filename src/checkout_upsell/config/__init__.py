# ⚙️ checkout_upsell/config/__init__.py
"""⚙️ Конфігурація віджета: `ConfigService`, константи та DI-контейнер."""

from .config_service import ConfigService

__all__ = ["ConfigService"]
