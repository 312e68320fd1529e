# ⚙️ checkout_upsell/config/setup/__init__.py
from .constants import CONST, AppConstants

__all__ = ["CONST", "AppConstants"]
