"""
Shared constants and configuration for the Magento2 client.

This module defines the REST route fragments and configuration
constants used by the api, cart and orders packages.
"""

from enum import Enum

# =============================================================================
# ROUTES (relative to <scheme>://<host>/rest/<store_code>/V1)
# =============================================================================

GUEST_CART = "/guest-carts"
CUSTOMER_CART = "/carts/mine"

CART_ITEMS = "/items"
CART_SHIPPING_COSTS = "/estimate-shipping-methods"
CART_SHIPPING_INFORMATION = "/shipping-information"
CART_PAYMENT_METHODS = "/payment-methods"
CART_PLACE_ORDER = "/payment-information"

ORDERS = "/orders"


# =============================================================================
# AUTHENTICATION
# =============================================================================

class AuthenticationType(str, Enum):
    """Which token endpoint a username/password pair is exchanged against."""
    ADMIN = "admin"
    CUSTOMER = "customer"

    @property
    def token_route(self) -> str:
        return f"/integration/{self.value}/token"


# =============================================================================
# CONFIGURATION
# =============================================================================

class Config:
    """Configuration constants."""

    # REST API
    API_VERSION = "V1"
    DEFAULT_SCHEME = "https"
    DEFAULT_STORE_CODE = "default"

    # Transport
    DEFAULT_TIMEOUT_SECONDS = 30

    # Environment variables read by StoreConfig.from_env()
    ENV_SCHEME = "MAGENTO2_SCHEME"
    ENV_HOSTNAME = "MAGENTO2_HOSTNAME"
    ENV_STORE_CODE = "MAGENTO2_STORE_CODE"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def may_trim_surrounding_quotes(value: str) -> str:
    """
    Strip one pair of surrounding double quotes, if present.

    Magento answers several endpoints (order placement, token
    exchange, guest cart creation) with a bare JSON string such
    as "42" instead of an object.

    Args:
        value: The raw response body

    Returns:
        The body without surrounding whitespace and quotes
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value
