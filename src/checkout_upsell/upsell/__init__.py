# 🎁 checkout_upsell/upsell/__init__.py
"""🎁 Ядро upsell-віджета: стан, запит каталогу, синхронізація з кошиком, мутація."""

from .cart_synchronizer import CartSynchronizer
from .catalog_fetcher import CatalogFetcher
from .error_banner import ErrorBanner
from .localization import Localizer
from .mutation_controller import CartMutationController
from .order_snapshot import OrderSnapshotFeed
from .state import RenderState, UpsellFlags, ViewMode
from .widget import UpsellWidget

__all__ = [
    "CartMutationController",
    "CartSynchronizer",
    "CatalogFetcher",
    "ErrorBanner",
    "Localizer",
    "OrderSnapshotFeed",
    "RenderState",
    "UpsellFlags",
    "UpsellWidget",
    "ViewMode",
]
