"""Cart package."""

from .models import (
    Item,
    Address,
    AddressInformation,
    Carrier,
    PaymentMethod,
    PaymentMethodCode,
    DetailedCart,
)

from .cart import Cart

__all__ = [
    # Resource
    "Cart",
    # Models
    "Item",
    "Address",
    "AddressInformation",
    "Carrier",
    "PaymentMethod",
    "PaymentMethodCode",
    "DetailedCart",
]
