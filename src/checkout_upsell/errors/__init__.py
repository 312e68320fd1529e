# 🚨 checkout_upsell/errors/__init__.py
"""🚨 Доменні винятки та стратегії їх конвертації."""

from .custom_errors import (
    AppError,
    CatalogFetchError,
    ErrorCode,
    MalformedPayloadError,
    MutationError,
    NetworkRequestError,
    StorefrontError,
    UserVisibleError,
)
from .strategies import (
    DEFAULT_STRATEGIES,
    HttpxErrorStrategy,
    IErrorHandlingStrategy,
    PayloadErrorStrategy,
    convert_error,
)

__all__ = [
    "AppError",
    "CatalogFetchError",
    "ErrorCode",
    "MalformedPayloadError",
    "MutationError",
    "NetworkRequestError",
    "StorefrontError",
    "UserVisibleError",
    "DEFAULT_STRATEGIES",
    "HttpxErrorStrategy",
    "IErrorHandlingStrategy",
    "PayloadErrorStrategy",
    "convert_error",
]
