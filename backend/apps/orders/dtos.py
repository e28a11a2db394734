from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List

from apps.carts.codec import address_to_raw, json_number, line_item_to_raw
from apps.carts.state import CartLineItem, ShippingAddress


@dataclass
class Order:
    order_items: List[CartLineItem]
    shipping_address: ShippingAddress
    number_of_items: int
    sub_total: Decimal
    tax: Decimal
    total: Decimal
    is_paid: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "orderItems": [line_item_to_raw(item) for item in self.order_items],
            "shippingAddress": address_to_raw(self.shipping_address),
            "numberOfItems": self.number_of_items,
            "subTotal": json_number(self.sub_total),
            "tax": json_number(self.tax),
            "total": json_number(self.total),
            "isPaid": self.is_paid,
        }


@dataclass
class OrderResult:
    has_error: bool
    message: str
