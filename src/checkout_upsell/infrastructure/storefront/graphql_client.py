# 🌐 checkout_upsell/infrastructure/storefront/graphql_client.py
"""
🌐 StorefrontClient: мінімальний асинхронний GraphQL-клієнт Storefront API.

🎯 Призначення:
    • надсилає `{query, variables}` POST-запитом через `httpx.AsyncClient`;
    • повертає розділ `data` відповіді;
    • будь-який збій (транспорт, HTTP-статус, не-JSON, `errors` у тілі) піднімає як `StorefrontError`.

⚙️ Нотатки:
    • клієнт створюється ліниво й перевикористовується; `close()` звільняє зʼєднання;
    • зовнішній `httpx.AsyncClient` (наприклад, з `MockTransport` у тестах) не закривається нами.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import asyncio
from typing import Any, Dict, Iterable, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from checkout_upsell.config.config_service import ConfigService
from checkout_upsell.config.setup.constants import CONST
from checkout_upsell.errors.custom_errors import MalformedPayloadError
from checkout_upsell.errors.strategies import DEFAULT_STRATEGIES, IErrorHandlingStrategy, convert_error
from checkout_upsell.shared.utils.logger import get_logger

logger = get_logger("storefront")


class StorefrontClient:
    """🌐 Виконує GraphQL-запити до Storefront API."""

    def __init__(
        self,
        api_url: str,
        access_token: Optional[str] = None,
        *,
        timeout_sec: float = CONST.STOREFRONT.TIMEOUT_SEC,
        client: Optional[httpx.AsyncClient] = None,
        strategies: Iterable[IErrorHandlingStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        if not api_url or not isinstance(api_url, str):
            raise ValueError("Storefront api_url is required and must be str.")
        self._api_url = api_url
        self._access_token = access_token or None
        self._timeout = float(timeout_sec)
        self._client = client
        self._owns_client = client is None
        self._strategies = tuple(strategies)
        self._init_lock = asyncio.Lock()
        logger.debug("⚙️ StorefrontClient url=%s timeout=%s", self._api_url, self._timeout)

    @classmethod
    def from_config(cls, config: ConfigService, *, client: Optional[httpx.AsyncClient] = None) -> "StorefrontClient":
        """🏗️ Будує клієнт із розділу `storefront` конфігурації."""
        return cls(
            api_url=config.get("storefront.api_url"),
            access_token=config.get("storefront.access_token"),
            timeout_sec=float(config.get("storefront.timeout_sec", CONST.STOREFRONT.TIMEOUT_SEC) or CONST.STOREFRONT.TIMEOUT_SEC),
            client=client,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    async def execute(self, query: str, variables: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Виконує запит і повертає `data`.

        Raises:
            StorefrontError: мережевий збій, неуспішний HTTP-статус або некоректне тіло.
        """
        client = await self._ensure_client()
        payload = {"query": query, "variables": dict(variables or {})}
        try:
            response = await client.post(self._api_url, json=payload, headers=self._headers())
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            error = convert_error(exc, self._strategies)
            logger.warning("🌐 Storefront request failed: %s", error, extra=error.to_log_extra())
            raise error from exc

        if not isinstance(body, dict):
            raise MalformedPayloadError("Storefront response is not a JSON object", url=self._api_url)

        errors = body.get("errors")
        if errors:
            message = self._first_error_message(errors)
            logger.warning("🌐 Storefront GraphQL errors: %s", message)
            raise MalformedPayloadError(f"Storefront GraphQL error: {message}", url=self._api_url, details=str(errors))

        data = body.get("data")
        if not isinstance(data, dict):
            raise MalformedPayloadError("Storefront response has no 'data' object", url=self._api_url)
        return data

    async def close(self) -> None:
        """🧹 Закриває власний HTTP-клієнт (зовнішній лишається відкритим)."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            logger.debug("🧹 StorefrontClient closed")
            self._client = None

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        async with self._init_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(timeout=self._timeout)
                self._owns_client = True
        return self._client

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._access_token:
            headers[CONST.STOREFRONT.TOKEN_HEADER] = self._access_token
        return headers

    @staticmethod
    def _first_error_message(errors: Any) -> str:
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
            return str(first)
        return str(errors)


__all__ = ["StorefrontClient"]
