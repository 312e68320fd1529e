"""
🧪 test_error_strategies.py - unit-тести для convert_error та стратегій

Перевіряє:
- httpx-таймаути, статуси й транспортні збої → NetworkRequestError
- JSON/KeyError → MalformedPayloadError
- AppError повертається як є, невідоме → AppError
- CancelledError не конвертується
"""

import asyncio
import json

import httpx
import pytest

from checkout_upsell.errors import (
    AppError,
    CatalogFetchError,
    ErrorCode,
    MalformedPayloadError,
    MutationError,
    NetworkRequestError,
    convert_error,
)
from checkout_upsell.errors.strategies import HttpxErrorStrategy, PayloadErrorStrategy

REQUEST = httpx.Request("POST", "https://shop.test/graphql")


@pytest.mark.parametrize("error,message", [
    (httpx.ReadTimeout("slow", request=REQUEST), "timed out"),
    (httpx.ConnectError("refused", request=REQUEST), "unreachable"),
    (httpx.HTTPStatusError("bad", request=REQUEST, response=httpx.Response(429, request=REQUEST)), "HTTP 429"),
])
def test_httpx_errors_become_network_errors(error, message):
    converted = convert_error(error)
    assert isinstance(converted, NetworkRequestError)
    assert message in converted.message
    assert converted.url == "https://shop.test/graphql"
    assert converted.to_log_extra()["error_code"] == ErrorCode.NETWORK


def test_status_code_is_kept():
    error = httpx.HTTPStatusError("bad", request=REQUEST, response=httpx.Response(503, request=REQUEST))
    assert convert_error(error).status_code == 503


def test_unbound_request_url_is_reported_as_na():
    converted = HttpxErrorStrategy().handle(httpx.ConnectError("refused"))
    assert converted.url == "N/A"


@pytest.mark.parametrize("error", [
    json.JSONDecodeError("Expecting value", "<html>", 0),
    KeyError("products"),
    TypeError("NoneType is not subscriptable"),
])
def test_payload_errors(error):
    assert isinstance(convert_error(error), MalformedPayloadError)


def test_payload_strategy_ignores_other_errors():
    assert PayloadErrorStrategy().handle(RuntimeError("x")) is None


def test_app_errors_pass_through():
    original = CatalogFetchError("down", url="u")
    assert convert_error(original) is original


def test_unknown_errors_are_wrapped():
    converted = convert_error(RuntimeError("weird"))
    assert type(converted) is AppError
    assert converted.message == "Unexpected error: RuntimeError"
    assert converted.details == "weird"


def test_cancelled_error_is_reraised():
    with pytest.raises(asyncio.CancelledError):
        convert_error(asyncio.CancelledError())


def test_custom_strategy_list_is_respected():
    assert type(convert_error(KeyError("x"), strategies=())) is AppError


def test_mutation_error_log_extra():
    error = MutationError("invalid merchandise id", merchandise_id="V2", details="raw")
    assert str(error) == "invalid merchandise id"
    assert error.to_log_extra() == {"error_code": ErrorCode.MUTATION, "details": "raw", "merchandise_id": "V2"}
