"""Translation between cart dataclasses and their JSON wire shape.

The wire shape is shared by the ``cart`` cookie and the cart API, and uses
the storefront's field names (``_id``, ``inStock``, ``firstName``...).
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Sequence, Tuple, Union

from .state import CartLineItem, ShippingAddress

# (attribute, wire key) pairs; the wire keys double as cookie names.
ADDRESS_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("first_name", "firstName"),
    ("last_name", "lastName"),
    ("address", "address"),
    ("address2", "address2"),
    ("zip", "zip"),
    ("city", "city"),
    ("country", "country"),
    ("phone", "phone"),
)


def json_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Same bounds as the cart API price field.
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
MAX_PRICE = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES)
# Per-request cap on the API; stored lines may grow past it through merges.
MAX_LINE_QUANTITY = 10000
MAX_STORED_QUANTITY = 10 ** 9


def _to_decimal(value: Any) -> Decimal:
    try:
        result = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid price {value!r}") from exc
    if not result.is_finite() or result < 0 or result >= MAX_PRICE:
        raise ValueError(f"Price out of range: {value!r}")
    if result != result.quantize(Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)):
        raise ValueError(f"Price has more than {PRICE_DECIMAL_PLACES} decimal places: {value!r}")
    return result


def line_item_from_raw(raw: Any) -> CartLineItem:
    """Build a line item from its wire form; raises ``ValueError`` when malformed."""
    if not isinstance(raw, Mapping):
        raise ValueError("Cart line must be an object")
    product_id = raw.get("_id") or raw.get("id")
    if product_id in (None, ""):
        raise ValueError("Cart line is missing its product id")
    try:
        quantity = int(raw.get("quantity", 1))
        in_stock = int(raw.get("inStock") or 0)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid quantity for cart line {product_id}") from exc
    if not 1 <= quantity <= MAX_STORED_QUANTITY:
        raise ValueError(f"Cart line {product_id} has an out of range quantity")
    size = raw.get("size")
    return CartLineItem(
        product_id=str(product_id),
        size=None if size is None else str(size),
        price=_to_decimal(raw.get("price", 0)),
        quantity=quantity,
        title=str(raw.get("title") or ""),
        slug=str(raw.get("slug") or ""),
        image=str(raw.get("image") or ""),
        gender=str(raw.get("gender") or ""),
        in_stock=in_stock,
    )


def line_item_to_raw(item: CartLineItem) -> Dict[str, Any]:
    return {
        "_id": item.product_id,
        "title": item.title,
        "slug": item.slug,
        "image": item.image,
        "gender": item.gender,
        "size": item.size,
        "price": json_number(item.price),
        "quantity": item.quantity,
        "inStock": item.in_stock,
    }


def parse_cart(text: str) -> List[CartLineItem]:
    """Decode the ``cart`` cookie value. Raises ``ValueError`` on any malformed content."""
    try:
        data = json.loads(text)
    except RecursionError as exc:
        raise ValueError("Cart payload is nested too deeply") from exc
    if not isinstance(data, list):
        raise ValueError("Cart payload must be a list")
    return [line_item_from_raw(raw) for raw in data]


def dump_cart(lines: Sequence[CartLineItem]) -> str:
    return json.dumps([line_item_to_raw(line) for line in lines], separators=(",", ":"))


def address_from_raw(raw: Mapping) -> ShippingAddress:
    """Missing keys become empty strings; only presence is validated upstream."""
    return ShippingAddress(
        **{attr: str(raw.get(key) or "") for attr, key in ADDRESS_FIELDS}
    )


def address_to_raw(address: ShippingAddress) -> Dict[str, str]:
    return {key: getattr(address, attr) or "" for attr, key in ADDRESS_FIELDS}
