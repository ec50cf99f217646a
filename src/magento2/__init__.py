"""
Magento2 REST client.

Typed access to the cart/checkout endpoints of a Magento2 store:

    from magento2 import ApiClient, StoreConfig, Item

    client = ApiClient.from_integration(StoreConfig(hostname="shop.example.com"), token)
    cart = client.new_guest_cart()
    cart.add_items([Item(sku="24-MB01", qty=1)])
"""

# api must be imported first: the client module pulls in the cart package.
from .api import (
    ApiClient,
    StoreConfig,
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

from .cart import (
    Cart,
    Item,
    Address,
    AddressInformation,
    Carrier,
    PaymentMethod,
    PaymentMethodCode,
    DetailedCart,
)

from .orders import Order

from .shared import AuthenticationType, Config

__version__ = "0.1.0"

__all__ = [
    # Client
    "ApiClient",
    "StoreConfig",
    "AuthenticationType",
    "Config",
    # Resources
    "Cart",
    "Order",
    # Models
    "Item",
    "Address",
    "AddressInformation",
    "Carrier",
    "PaymentMethod",
    "PaymentMethodCode",
    "DetailedCart",
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
