"""
🧪 test_storefront_client.py - unit-тести для StorefrontClient

Перевіряє:
- POST {query, variables} з токеном доступу
- Повернення розділу data
- Конвертацію HTTP-статусів, таймаутів, не-JSON та GraphQL errors у StorefrontError
- Закриття лише власного HTTP-клієнта
"""

import json

import httpx
import pytest

from checkout_upsell.errors.custom_errors import MalformedPayloadError, NetworkRequestError, StorefrontError
from checkout_upsell.infrastructure.storefront.graphql_client import StorefrontClient

API_URL = "https://shop.test/api/graphql.json"


def _client(handler, token="secret"):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StorefrontClient(API_URL, token, client=http), http


@pytest.mark.asyncio
async def test_execute_posts_query_and_returns_data():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"ok": True}})

    client, http = _client(handler)
    data = await client.execute("query { ok }", {"first": 5})

    assert data == {"ok": True}
    assert captured["body"] == {"query": "query { ok }", "variables": {"first": 5}}
    assert captured["headers"]["X-Shopify-Storefront-Access-Token"] == "secret"
    assert captured["headers"]["Content-Type"] == "application/json"
    await http.aclose()


@pytest.mark.asyncio
async def test_token_header_is_omitted_without_token():
    seen = {}

    def handler(request):
        seen["has_token"] = "X-Shopify-Storefront-Access-Token" in request.headers
        return httpx.Response(200, json={"data": {}})

    client, http = _client(handler, token=None)
    await client.execute("query { ok }")
    assert seen["has_token"] is False
    await http.aclose()


@pytest.mark.asyncio
async def test_http_status_error_becomes_network_error():
    client, http = _client(lambda request: httpx.Response(503, text="down"))

    with pytest.raises(NetworkRequestError) as exc_info:
        await client.execute("query { ok }")

    assert exc_info.value.status_code == 503
    assert exc_info.value.url == API_URL
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
    await http.aclose()


@pytest.mark.asyncio
async def test_timeout_becomes_network_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    client, http = _client(handler)
    with pytest.raises(NetworkRequestError, match="timed out"):
        await client.execute("query { ok }")
    await http.aclose()


@pytest.mark.asyncio
async def test_non_json_body_becomes_malformed_payload():
    client, http = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(MalformedPayloadError):
        await client.execute("query { ok }")
    await http.aclose()


@pytest.mark.parametrize("body", [
    {"errors": [{"message": "Field 'x' doesn't exist"}]},
    {"data": None},
    [1, 2, 3],
])
@pytest.mark.asyncio
async def test_invalid_graphql_envelope_is_rejected(body):
    client, http = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(MalformedPayloadError):
        await client.execute("query { ok }")
    await http.aclose()


@pytest.mark.asyncio
async def test_graphql_error_message_is_reported():
    body = {"errors": [{"message": "Throttled"}], "data": None}
    client, http = _client(lambda request: httpx.Response(200, json=body))

    with pytest.raises(StorefrontError, match="Throttled"):
        await client.execute("query { ok }")
    await http.aclose()


@pytest.mark.asyncio
async def test_close_keeps_external_client_open():
    client, http = _client(lambda request: httpx.Response(200, json={"data": {}}))
    await client.close()
    assert not http.is_closed
    await http.aclose()


@pytest.mark.asyncio
async def test_close_releases_own_client():
    client = StorefrontClient(API_URL)
    own = await client._ensure_client()
    await client.close()
    assert own.is_closed


def test_api_url_is_required():
    with pytest.raises(ValueError):
        StorefrontClient("")
