"""API package initialization."""

from .errors import (
    Magento2Error,
    ConfigurationError,
    TransportError,
    RemoteError,
    ResponseDecodeError,
    EmptyResultError,
    NoCarrierAvailable,
    NoPaymentMethodAvailable,
    OrderCreationError,
    AuthenticationError,
)

from .client import ApiClient, StoreConfig

__all__ = [
    # Client
    "ApiClient",
    "StoreConfig",
    # Errors
    "Magento2Error",
    "ConfigurationError",
    "TransportError",
    "RemoteError",
    "ResponseDecodeError",
    "EmptyResultError",
    "NoCarrierAvailable",
    "NoPaymentMethodAvailable",
    "OrderCreationError",
    "AuthenticationError",
]
