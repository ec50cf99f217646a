"""
Data models for the cart workflow.

These are plain value objects that travel as request payloads and
response bodies. Field names match Magento's JSON keys so that
to_dict()/from_dict() are straight mappings.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset (None) values; Magento treats absent and null differently."""
    return {key: value for key, value in data.items() if value is not None}


def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the keys the dataclass declares."""
    if not isinstance(data, dict):
        raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class Item:
    """
    A line item in a cart.

    item_id is assigned by Magento when the item is added; quote_id
    is overwritten by Cart.add_items() before submission.
    """
    sku: str = ""
    qty: int = 0
    item_id: Optional[int] = None
    quote_id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    product_type: Optional[str] = None
    product_option: Optional[Dict] = None

    def to_dict(self) -> Dict:
        return _compact({
            "item_id": self.item_id,
            "sku": self.sku,
            "qty": self.qty,
            "quote_id": self.quote_id,
            "name": self.name,
            "price": self.price,
            "product_type": self.product_type,
            "product_option": self.product_option,
        })

    @classmethod
    def from_dict(cls, data: Dict) -> "Item":
        item = cls(**_known(cls, data))
        if item.quote_id is not None:
            item.quote_id = str(item.quote_id)
        return item


@dataclass
class Address:
    """Address used for shipping estimation and as shipping/billing address."""
    street: List[str] = field(default_factory=list)
    city: str = ""
    region: str = ""
    postcode: str = ""
    country_id: str = ""

    region_id: Optional[int] = None
    region_code: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    same_as_billing: Optional[int] = None

    def to_dict(self) -> Dict:
        return _compact({
            "street": list(self.street),
            "city": self.city,
            "region": self.region,
            "region_id": self.region_id,
            "region_code": self.region_code,
            "postcode": self.postcode,
            "country_id": self.country_id,
            "firstname": self.firstname,
            "lastname": self.lastname,
            "company": self.company,
            "email": self.email,
            "telephone": self.telephone,
            "same_as_billing": self.same_as_billing,
        })

    @classmethod
    def from_dict(cls, data: Dict) -> "Address":
        return cls(**_known(cls, data))


@dataclass
class AddressInformation:
    """Shipping selection: where to ship and which carrier/method."""
    shipping_address: Address
    shipping_method_code: str
    shipping_carrier_code: str
    billing_address: Optional[Address] = None

    def to_dict(self) -> Dict:
        return _compact({
            "shipping_address": self.shipping_address.to_dict(),
            "billing_address": self.billing_address.to_dict() if self.billing_address else None,
            "shipping_method_code": self.shipping_method_code,
            "shipping_carrier_code": self.shipping_carrier_code,
        })

    @classmethod
    def for_carrier(
        cls,
        address: Address,
        carrier: "Carrier",
        billing_address: Optional[Address] = None
    ) -> "AddressInformation":
        """Select an estimated carrier for the given address."""
        return cls(
            shipping_address=address,
            shipping_method_code=carrier.method_code,
            shipping_carrier_code=carrier.carrier_code,
            billing_address=billing_address,
        )


@dataclass
class Carrier:
    """A shipping option returned by shipping estimation."""
    carrier_code: str = ""
    method_code: str = ""
    carrier_title: str = ""
    method_title: str = ""
    amount: float = 0.0
    base_amount: float = 0.0
    available: bool = True
    error_message: str = ""
    price_excl_tax: float = 0.0
    price_incl_tax: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict) -> "Carrier":
        return cls(**_known(cls, data))


@dataclass
class PaymentMethod:
    """A payment option offered for the cart."""
    code: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "PaymentMethod":
        return cls(**_known(cls, data))


@dataclass
class PaymentMethodCode:
    """The payment selection submitted when placing the order."""
    method: str

    def to_dict(self) -> Dict:
        return {"method": self.method}


@dataclass
class DetailedCart:
    """
    Snapshot of the remote cart as last fetched.

    Always replaced as a whole by Cart.update_self(); nothing here
    is patched client-side.
    """
    id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_active: bool = False
    is_virtual: bool = False
    items: List[Item] = field(default_factory=list)
    items_count: int = 0
    items_qty: float = 0
    customer: Dict = field(default_factory=dict)
    billing_address: Optional[Address] = None
    orig_order_id: int = 0
    currency: Dict = field(default_factory=dict)
    customer_is_guest: bool = False
    customer_note_notify: bool = False
    customer_tax_class_id: int = 0
    store_id: int = 0
    extension_attributes: Dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "DetailedCart":
        values = _known(cls, data)
        values["items"] = [Item.from_dict(item) for item in values.get("items") or []]
        if values.get("billing_address"):
            values["billing_address"] = Address.from_dict(values["billing_address"])
        for key in ("customer", "currency", "extension_attributes"):
            if values.get(key) is None:
                values.pop(key, None)
        return cls(**values)

    @property
    def item_ids(self) -> List[int]:
        return [item.item_id for item in self.items if item.item_id is not None]
