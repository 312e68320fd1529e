# 🌐 checkout_upsell/infrastructure/storefront/__init__.py
"""🌐 Storefront API: GraphQL-клієнт, запит каталогу, мутація кошика."""

from .cart_mutation import StorefrontCartService
from .catalog_query import StorefrontCatalogQuery, build_offers_query, parse_offers
from .graphql_client import StorefrontClient

__all__ = [
    "StorefrontCartService",
    "StorefrontCatalogQuery",
    "StorefrontClient",
    "build_offers_query",
    "parse_offers",
]
