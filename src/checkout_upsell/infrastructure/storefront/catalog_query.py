# 📚 checkout_upsell/infrastructure/storefront/catalog_query.py
"""
📚 StorefrontCatalogQuery: регіональний запит upsell-кандидатів.

🔹 Запит виконується в контексті країни (`@inContext(country: ...)`).
🔹 Для кожного товару беремо перше зображення та перший варіант з ціною.
🔹 Товари без варіантів відкидаються ще на етапі парсингу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, List, Mapping, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.domain.locale.region_resolver import RegionCode
from checkout_upsell.domain.offers.entities import Money, OfferCandidate, PurchasableUnit
from checkout_upsell.domain.offers.interfaces import ICatalogQuery
from checkout_upsell.errors.custom_errors import CatalogFetchError, StorefrontError
from checkout_upsell.shared.utils.logger import get_logger
from .graphql_client import StorefrontClient

logger = get_logger("catalog")


_OFFERS_QUERY = """query ($first: Int!) @inContext(country: %(country)s) {
  products(first: $first, query: %(tag)s) {
    nodes {
      id
      title
      images(first: 1) {
        nodes {
          url
        }
      }
      variants(first: 1) {
        nodes {
          id
          price {
            amount
            currencyCode
          }
        }
      }
    }
  }
}"""


def build_offers_query(region: RegionCode, tag: str = CONST.LOGIC.QUERY_TAG) -> str:
    """Підставляє країну (enum-літерал GraphQL) та тег пошуку в текст запиту."""
    escaped_tag = tag.replace("\\", "\\\\").replace('"', '\\"')
    return _OFFERS_QUERY % {"country": RegionCode(region).value, "tag": f'"{escaped_tag}"'}


def _nodes(container: Any) -> List[Any]:
    """`{nodes: [...]}` → список; відсутній контейнер → []."""
    if container is None:
        return []
    nodes = container["nodes"]
    if not isinstance(nodes, list):
        raise TypeError(f"'nodes' must be a list, got {type(nodes).__name__}")
    return nodes


def parse_offer_node(node: Mapping[str, Any]) -> Optional[OfferCandidate]:
    """
    Перетворює вузол `products.nodes[i]` у кандидата.

    Returns:
        OfferCandidate або None, якщо в товару немає жодного варіанту.

    Raises:
        KeyError / TypeError / ValueError: вузол не відповідає схемі.
    """
    images = _nodes(node.get("images"))
    image_url = images[0].get("url") if images else None

    variants = _nodes(node.get("variants"))
    if not variants:
        logger.debug("🚫 Товар %s без варіантів, пропускаємо", node.get("id"))
        return None

    variant = variants[0]
    price = variant["price"]
    unit = PurchasableUnit(
        id=variant["id"],
        price=Money(amount=price["amount"], currency_code=price["currencyCode"]),
    )
    return OfferCandidate(
        id=node["id"],
        title=node.get("title") or "",
        image_url=image_url,
        units=(unit,),
    )


def parse_offers(data: Mapping[str, Any]) -> List[OfferCandidate]:
    """
    Розбирає `data` відповіді у список кандидатів у порядку каталогу.

    Raises:
        CatalogFetchError: структура відповіді некоректна.
    """
    try:
        products = data["products"]
        if not isinstance(products, Mapping):
            raise TypeError(f"'products' must be an object, got {type(products).__name__}")
        nodes = _nodes(products)
        candidates = [parse_offer_node(node) for node in nodes]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise CatalogFetchError("Malformed products payload", details=repr(exc)) from exc
    return [candidate for candidate in candidates if candidate is not None]


class StorefrontCatalogQuery(ICatalogQuery):
    """📚 Реалізація `ICatalogQuery` поверх Storefront GraphQL."""

    def __init__(self, client: StorefrontClient, *, tag: str = CONST.LOGIC.QUERY_TAG) -> None:
        self._client = client
        self._tag = tag

    async def fetch_offers(self, region: RegionCode, first: int) -> Sequence[OfferCandidate]:
        query = build_offers_query(region, self._tag)
        logger.info("📚 Запит upsell-кандидатів: region=%s first=%d tag=%s", RegionCode(region).value, first, self._tag)
        try:
            data = await self._client.execute(query, {"first": int(first)})
        except StorefrontError as exc:
            raise CatalogFetchError(
                f"Catalog query failed: {exc.message}",
                details=exc.details,
                url=exc.url,
                status_code=exc.status_code,
            ) from exc
        offers = parse_offers(data)
        logger.info("📚 Отримано %d кандидатів", len(offers))
        return offers


__all__ = ["StorefrontCatalogQuery", "build_offers_query", "parse_offer_node", "parse_offers"]
