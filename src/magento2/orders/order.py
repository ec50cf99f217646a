"""Order resource, the result of a successful cart checkout."""

from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from ..api.client import ApiClient


class Order:
    """
    A placed order.

    Built by Cart.create_order(); it keeps the shared client but no
    reference to the cart it came from.
    """

    def __init__(self, id: int, route: str, client: 'ApiClient'):
        self.id = id
        self.route = route
        self.client = client

    def get_details(self) -> Dict:
        """Fetch the order as Magento renders it (requires an admin-scoped token)."""
        return self.client.request_json("GET", self.route)

    def __eq__(self, other):
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id and self.route == other.route

    def __hash__(self):
        return hash((self.id, self.route))

    def __repr__(self):
        return f"Order(id={self.id!r}, route={self.route!r})"
