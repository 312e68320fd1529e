# 🧊 checkout_upsell/shared/utils/immutables.py
"""
🧊 Незмінні лейбли для шару рендерингу.

🔹 `freeze()` віддає рендереру знімок, який не можна змінити на місці.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def freeze(obj: Any) -> Any:
    """Мапи стають `MappingProxyType`, списки й кортежі стають tuple; решта повертається як є."""
    if isinstance(obj, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(freeze(value) for value in obj)
    return obj
