"""
🧪 test_cart_mutation.py - unit-тести для StorefrontCartService

Перевіряє:
- Змінні cartLinesAdd (cartId, merchandiseId, quantity)
- Успіх → оновлені рядки кошика; обрізаний пагінацією кошик не повертає рядків
- userErrors, збої мережі та некоректне тіло → MutationOutcome.error без винятків
"""

import json
import logging

import httpx
import pytest

from checkout_upsell.domain.offers.entities import OrderLine
from checkout_upsell.infrastructure.storefront import StorefrontCartService, StorefrontClient

CART_ID = "gid://shopify/Cart/1"


def _service(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StorefrontCartService(StorefrontClient("https://shop.test/graphql", client=http), CART_ID), http


def _cart(*variant_ids, has_next_page=False):
    return {
        "id": CART_ID,
        "lines": {"pageInfo": {"hasNextPage": has_next_page}, "nodes": [
            {"id": f"L{i}", "quantity": 1, "merchandise": {"id": variant_id}}
            for i, variant_id in enumerate(variant_ids)
        ]},
    }


@pytest.mark.asyncio
async def test_add_line_returns_updated_order():
    captured = {}

    def handler(request):
        captured.update(json.loads(request.content))
        body = {"data": {"cartLinesAdd": {"cart": _cart("V1", "V2"), "userErrors": []}}}
        return httpx.Response(200, json=body)

    service, http = _service(handler)
    outcome = await service.add_line("V2", 1)

    assert not outcome.is_error
    assert outcome.order_lines == (OrderLine("V1", 1, "L0"), OrderLine("V2", 1, "L1"))
    assert captured["variables"] == {"cartId": CART_ID, "lines": [{"merchandiseId": "V2", "quantity": 1}]}
    assert "cartLinesAdd" in captured["query"]
    await http.aclose()


@pytest.mark.asyncio
async def test_user_errors_become_error_outcome():
    body = {"data": {"cartLinesAdd": {"cart": None, "userErrors": [{"field": ["lines"], "message": "invalid merchandise id"}]}}}
    service, http = _service(lambda request: httpx.Response(200, json=body))

    outcome = await service.add_line("BAD", 1)

    assert outcome.is_error
    assert outcome.message == "invalid merchandise id"
    await http.aclose()


@pytest.mark.asyncio
async def test_network_failure_becomes_error_outcome():
    service, http = _service(lambda request: httpx.Response(500))

    outcome = await service.add_line("V1", 1)

    assert outcome.is_error
    assert "HTTP 500" in outcome.message
    await http.aclose()


@pytest.mark.asyncio
async def test_malformed_payload_becomes_error_outcome():
    service, http = _service(lambda request: httpx.Response(200, json={"data": {}}))

    outcome = await service.add_line("V1", 1)

    assert outcome.is_error
    assert "Malformed" in outcome.message
    await http.aclose()


def test_cart_id_is_required():
    with pytest.raises(ValueError):
        StorefrontCartService(StorefrontClient("https://shop.test/graphql"), "")


@pytest.mark.asyncio
async def test_truncated_cart_is_not_reported_as_order(caplog):
    captured = {}

    def handler(request):
        captured.update(json.loads(request.content))
        body = {"data": {"cartLinesAdd": {"cart": _cart("V1", "V2", has_next_page=True), "userErrors": []}}}
        return httpx.Response(200, json=body)

    service, http = _service(handler)
    with caplog.at_level(logging.WARNING, logger="checkout_upsell"):
        outcome = await service.add_line("V2", 1)

    assert not outcome.is_error
    assert outcome.order_lines is None
    assert "hasNextPage" in captured["query"]
    assert "знімок замовлення не оновлюється" in caplog.text
    await http.aclose()
