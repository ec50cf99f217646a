"""
Cart resource.

A Cart wraps one remote quote (guest or customer) and exposes the
checkout sequence:

1. add_items
2. estimate_shipping_carrier
3. add_shipping_information
4. estimate_payment_methods
5. create_order

Each method is one (or N sequential) round-trips. Partial failures
in add_items/delete_all_items are not rolled back: whatever was
committed remotely before the failing request stays committed.
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Iterable, List

import requests

from ..shared.constants import (
    CART_ITEMS, CART_SHIPPING_COSTS, CART_SHIPPING_INFORMATION,
    CART_PAYMENT_METHODS, CART_PLACE_ORDER, ORDERS,
    may_trim_surrounding_quotes,
)
from ..shared.logger import get_logger
from ..api.errors import (
    NoCarrierAvailable,
    NoPaymentMethodAvailable,
    OrderCreationError,
    ResponseDecodeError,
)
from ..orders.order import Order
from .models import (
    Address,
    AddressInformation,
    Carrier,
    DetailedCart,
    Item,
    PaymentMethod,
    PaymentMethodCode,
)

if TYPE_CHECKING:
    from ..api.client import ApiClient


logger = get_logger(__name__)


ORDER_ID = re.compile(r"-?\d+", re.ASCII)


def _array(data: Any) -> list:
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return data


class Cart:
    """
    A remote shopping cart identified by its quote id.

    `detailed` is a cache of the remote state. It is only refreshed
    by update_self() (called by the mutating methods that refresh on
    success) and is never assumed to be current otherwise.
    """

    def __init__(
        self,
        route: str,
        quote_id: str,
        client: 'ApiClient',
        detailed: DetailedCart = None
    ):
        self.route = route
        self.quote_id = str(quote_id)
        self.client = client
        self.detailed = detailed if detailed is not None else DetailedCart()

        self.log = logger.bind(route=route, quote_id=self.quote_id)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def get_details(self) -> DetailedCart:
        """Fetch the current remote cart. Does not touch self.detailed."""
        response = self.client.request("GET", self.route)
        return self._decode(response, DetailedCart.from_dict)

    def update_self(self) -> DetailedCart:
        """Replace the cached snapshot with a freshly fetched one."""
        self.detailed = self.get_details()
        return self.detailed

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    def add_items(self, items: Iterable[Item]):
        """
        Add items one request at a time, in order.

        Stops at the first failing request; earlier items remain in
        the remote cart. Refreshes the snapshot when all succeed.
        """
        endpoint = self.route + CART_ITEMS

        for item in items:
            item.quote_id = self.quote_id
            self.client.request("POST", endpoint, {"cartItem": item.to_dict()})
            self.log.debug("added item", sku=item.sku, qty=item.qty)

        self.update_self()

    def delete_item(self, item_id: int):
        """Remove one line item."""
        endpoint = f"{self.route}{CART_ITEMS}/{int(item_id)}"
        self.client.request("DELETE", endpoint)
        self.log.debug("deleted item", item_id=item_id)

    def delete_all_items(self):
        """
        Refresh, then delete every item of the fresh snapshot.

        Deletions run in ascending item id order and stop at the
        first failure, leaving the remaining items in place.
        """
        self.update_self()

        for item_id in sorted(self.detailed.item_ids):
            self.delete_item(item_id)

    # -------------------------------------------------------------------------
    # Shipping
    # -------------------------------------------------------------------------

    def estimate_shipping_carrier(self, address: Address) -> List[Carrier]:
        """
        Ask which carriers can ship this cart to `address`.

        Raises:
            NoCarrierAvailable: the estimate succeeded but is empty
        """
        endpoint = self.route + CART_SHIPPING_COSTS
        response = self.client.request("POST", endpoint, {"address": address.to_dict()})

        carriers = self._decode(
            response, lambda data: [Carrier.from_dict(entry) for entry in _array(data)]
        )
        if not carriers:
            raise NoCarrierAvailable(
                f"no shipping carrier available for {address.country_id} {address.postcode}"
            )
        return carriers

    def add_shipping_information(self, address_information: AddressInformation):
        """Set shipping address and method, then refresh."""
        endpoint = self.route + CART_SHIPPING_INFORMATION
        self.client.request(
            "POST", endpoint, {"addressInformation": address_information.to_dict()}
        )
        self.update_self()

    # -------------------------------------------------------------------------
    # Payment & checkout
    # -------------------------------------------------------------------------

    def estimate_payment_methods(self) -> List[PaymentMethod]:
        """
        List payment methods available for this cart.

        Raises:
            NoPaymentMethodAvailable: the estimate succeeded but is empty
        """
        endpoint = self.route + CART_PAYMENT_METHODS
        response = self.client.request("GET", endpoint)

        methods = self._decode(
            response, lambda data: [PaymentMethod.from_dict(entry) for entry in _array(data)]
        )
        if not methods:
            raise NoPaymentMethodAvailable(f"no payment method available for cart {self.quote_id}")
        return methods

    def create_order(self, payment_method: PaymentMethod) -> Order:
        """
        Place the order with the chosen payment method.

        Magento answers with the bare order id, quoted or not
        ("42" or 42).
        """
        endpoint = self.route + CART_PLACE_ORDER
        payload = {"paymentMethod": PaymentMethodCode(method=payment_method.code).to_dict()}

        response = self.client.request("PUT", endpoint, payload)

        order_id_string = may_trim_surrounding_quotes(response.text)
        if not ORDER_ID.fullmatch(order_id_string):
            raise OrderCreationError(
                f"cart {self.quote_id}: response is not an order id",
                status_code=response.status_code,
                body=response.text,
            )
        order_id = int(order_id_string)

        self.log.info("order created", order_id=order_id, payment_method=payment_method.code)
        return Order(order_id, f"{ORDERS}/{order_id}", self.client)

    def _decode(self, response: requests.Response, parse: Callable[[Any], Any]) -> Any:
        """Decode and map a 2xx body; any shape mismatch is a ResponseDecodeError."""
        data = self.client.decode_json(response)
        try:
            return parse(data)
        except (TypeError, ValueError) as e:
            raise ResponseDecodeError(
                f"unexpected response shape: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def __repr__(self):
        return f"Cart(route={self.route!r}, quote_id={self.quote_id!r})"
