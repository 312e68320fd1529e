# 🛒 checkout_upsell/infrastructure/storefront/cart_mutation.py
"""
🛒 StorefrontCartService: додавання рядка в кошик через `cartLinesAdd`.

🔹 Ніколи не кидає (окрім скасування): будь-який збій стає `MutationOutcome.error(message)`.
🔹 `userErrors` Storefront-у → перше повідомлення як діагностика.
🔹 Успіх → оновлений список рядків кошика для публікації в стрічку знімків замовлення.
🔹 Кошик більший за одну сторінку рядків → успіх без рядків: неповний список не публікується.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, List, Mapping

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.domain.offers.entities import OrderLine
from checkout_upsell.domain.offers.interfaces import IOrderMutationService, MutationOutcome
from checkout_upsell.errors.custom_errors import StorefrontError
from checkout_upsell.shared.utils.logger import get_logger
from .graphql_client import StorefrontClient

logger = get_logger("cart")


CART_LINES_ADD_MUTATION = """mutation cartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!) {
  cartLinesAdd(cartId: $cartId, lines: $lines) {
    cart {
      id
      lines(first: 100) {
        pageInfo {
          hasNextPage
        }
        nodes {
          id
          quantity
          merchandise {
            ... on ProductVariant {
              id
            }
          }
        }
      }
    }
    userErrors {
      field
      message
    }
  }
}"""


def parse_cart_lines(cart: Mapping[str, Any]) -> List[OrderLine]:
    """`cart.lines.nodes` → рядки замовлення (рядки без merchandise.id пропускаються)."""
    lines: List[OrderLine] = []
    for node in (cart.get("lines") or {}).get("nodes") or []:
        merchandise = node.get("merchandise") or {}
        merchandise_id = merchandise.get("id")
        if not merchandise_id:
            logger.debug("🚫 Рядок кошика %s без merchandise.id", node.get("id"))
            continue
        lines.append(
            OrderLine(
                merchandise_id=merchandise_id,
                quantity=int(node.get("quantity") or 1),
                line_id=node.get("id"),
            )
        )
    return lines


def has_more_lines(cart: Mapping[str, Any]) -> bool:
    """Чи обрізано `cart.lines` пагінацією (тоді список не є повним знімком)."""
    page_info = (cart.get("lines") or {}).get("pageInfo") or {}
    return bool(page_info.get("hasNextPage"))


class StorefrontCartService(IOrderMutationService):
    """🛒 Реалізація `IOrderMutationService` для конкретного кошика."""

    def __init__(self, client: StorefrontClient, cart_id: str) -> None:
        if not cart_id:
            raise ValueError("cart_id is required")
        self._client = client
        self._cart_id = cart_id

    async def add_line(self, merchandise_id: str, quantity: int) -> MutationOutcome:
        variables = {
            "cartId": self._cart_id,
            "lines": [{"merchandiseId": merchandise_id, "quantity": int(quantity)}],
        }
        logger.info("🛒 cartLinesAdd merchandise=%s quantity=%d", merchandise_id, quantity)
        try:
            data = await self._client.execute(CART_LINES_ADD_MUTATION, variables)
        except StorefrontError as exc:
            return MutationOutcome.error(exc.message)

        try:
            payload = data["cartLinesAdd"] or {}
            user_errors = payload.get("userErrors") or []
            if user_errors:
                first = user_errors[0]
                message = first.get("message") if isinstance(first, dict) else str(first)
                return MutationOutcome.error(str(message or "Unknown cart error"))
            cart = payload.get("cart") or {}
            truncated = has_more_lines(cart)
            lines = None if truncated else parse_cart_lines(cart)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.debug("📄 Некоректна відповідь cartLinesAdd", exc_info=True)
            return MutationOutcome.error(f"Malformed cartLinesAdd payload: {exc!r}")
        if truncated:
            logger.warning("⚠️ Кошик %s має більше рядків, ніж повернуто; знімок замовлення не оновлюється", self._cart_id)
        return MutationOutcome.success(lines)


__all__ = ["StorefrontCartService", "CART_LINES_ADD_MUTATION", "has_more_lines", "parse_cart_lines"]
