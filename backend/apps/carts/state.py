"""Cart data model, actions and the pure reducer.

Nothing in this module performs I/O. ``cart_reducer`` takes the current
``CartState`` plus one action and returns a new ``CartState``; line items are
immutable and replaced, never edited in place. Persistence and totals
recomputation are reactions run by ``apps.carts.store.CartStore``.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable, Dict, Iterable, Optional, Tuple, Type, Union

ZERO = Decimal("0")

LineKey = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class CartLineItem:
    product_id: str
    size: Optional[str]
    price: Decimal
    quantity: int
    title: str = ""
    slug: str = ""
    image: str = ""
    gender: str = ""
    in_stock: int = 0

    @property
    def key(self) -> LineKey:
        return (self.product_id, self.size)

    def with_quantity(self, quantity: int) -> "CartLineItem":
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class ShippingAddress:
    first_name: str
    last_name: str
    address: str
    zip: str
    city: str
    country: str
    phone: str
    address2: str = ""


@dataclass(frozen=True)
class CartSummary:
    number_of_items: int = 0
    sub_total: Decimal = ZERO
    tax: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class CartState:
    is_loaded: bool = False
    lines: Tuple[CartLineItem, ...] = ()
    number_of_items: int = 0
    sub_total: Decimal = ZERO
    tax: Decimal = ZERO
    total: Decimal = ZERO
    shipping_address: Optional[ShippingAddress] = None

    @property
    def summary(self) -> CartSummary:
        return CartSummary(
            number_of_items=self.number_of_items,
            sub_total=self.sub_total,
            tax=self.tax,
            total=self.total,
        )


def summarize(lines: Iterable[CartLineItem], tax_rate) -> CartSummary:
    """Derive item count and money totals from the line items."""
    rate = tax_rate if isinstance(tax_rate, Decimal) else Decimal(str(tax_rate))
    lines = tuple(lines)
    sub_total = sum((line.price * line.quantity for line in lines), ZERO)
    return CartSummary(
        number_of_items=sum(line.quantity for line in lines),
        sub_total=sub_total,
        tax=sub_total * rate,
        total=sub_total * (rate + 1),
    )


# --- actions ---------------------------------------------------------------


@dataclass(frozen=True)
class HydrateCart:
    lines: Tuple[CartLineItem, ...]


@dataclass(frozen=True)
class HydrateAddress:
    address: ShippingAddress


@dataclass(frozen=True)
class AddProduct:
    item: CartLineItem


@dataclass(frozen=True)
class SetLineQuantity:
    item: CartLineItem


@dataclass(frozen=True)
class RemoveLine:
    product_id: str
    size: Optional[str]


@dataclass(frozen=True)
class SetShippingAddress:
    address: ShippingAddress


@dataclass(frozen=True)
class UpdateOrderSummary:
    summary: CartSummary


@dataclass(frozen=True)
class CompleteOrder:
    pass


CartAction = Union[
    HydrateCart,
    HydrateAddress,
    AddProduct,
    SetLineQuantity,
    RemoveLine,
    SetShippingAddress,
    UpdateOrderSummary,
    CompleteOrder,
]


# --- transitions -----------------------------------------------------------


def _hydrate_cart(state: CartState, action: HydrateCart) -> CartState:
    return replace(state, is_loaded=True, lines=tuple(action.lines))


def _hydrate_address(state: CartState, action: HydrateAddress) -> CartState:
    if state.shipping_address is not None:
        return state
    return replace(state, shipping_address=action.address)


def _add_product(state: CartState, action: AddProduct) -> CartState:
    item = action.item
    lines = []
    merged = False
    for line in state.lines:
        if not merged and line.key == item.key:
            line = line.with_quantity(line.quantity + item.quantity)
            merged = True
        lines.append(line)
    if not merged:
        lines.append(item)
    return replace(state, lines=tuple(lines))


def _set_line_quantity(state: CartState, action: SetLineQuantity) -> CartState:
    item = action.item
    if item.quantity <= 0:
        return _remove_line(state, RemoveLine(item.product_id, item.size))
    lines = tuple(
        line.with_quantity(item.quantity) if line.key == item.key else line
        for line in state.lines
    )
    return replace(state, lines=lines)


def _remove_line(state: CartState, action: RemoveLine) -> CartState:
    key = (action.product_id, action.size)
    return replace(state, lines=tuple(line for line in state.lines if line.key != key))


def _set_shipping_address(state: CartState, action: SetShippingAddress) -> CartState:
    return replace(state, shipping_address=action.address)


def _update_order_summary(state: CartState, action: UpdateOrderSummary) -> CartState:
    summary = action.summary
    return replace(
        state,
        number_of_items=summary.number_of_items,
        sub_total=summary.sub_total,
        tax=summary.tax,
        total=summary.total,
    )


def _complete_order(state: CartState, action: CompleteOrder) -> CartState:
    return replace(
        state,
        lines=(),
        number_of_items=0,
        sub_total=ZERO,
        tax=ZERO,
        total=ZERO,
    )


_TRANSITIONS: Dict[Type, Callable[[CartState, object], CartState]] = {
    HydrateCart: _hydrate_cart,
    HydrateAddress: _hydrate_address,
    AddProduct: _add_product,
    SetLineQuantity: _set_line_quantity,
    RemoveLine: _remove_line,
    SetShippingAddress: _set_shipping_address,
    UpdateOrderSummary: _update_order_summary,
    CompleteOrder: _complete_order,
}


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    transition = _TRANSITIONS.get(type(action))
    if transition is None:
        raise TypeError(f"Unknown cart action: {type(action).__name__}")
    return transition(state, action)
