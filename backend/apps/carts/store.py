from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from django.conf import settings

from apps.common import get_logger
from .codec import ADDRESS_FIELDS, address_from_raw, address_to_raw, dump_cart, parse_cart
from .mirror import CART_KEY, CookieMirror
from .state import (
    AddProduct,
    CartAction,
    CartLineItem,
    CartState,
    CompleteOrder,
    HydrateAddress,
    HydrateCart,
    RemoveLine,
    SetLineQuantity,
    SetShippingAddress,
    ShippingAddress,
    UpdateOrderSummary,
    cart_reducer,
    summarize,
)

logger = get_logger(__name__).bind(component="carts", layer="store")


class StorePhase(Enum):
    UNINITIALIZED = "uninitialized"
    HYDRATING = "hydrating"
    READY = "ready"


class CartStore:
    """Single-writer holder of the shopper's ``CartState``.

    Construction hydrates synchronously from the mirror. Every change goes
    through :meth:`dispatch`, which runs the pure reducer and then the
    reactions: when the line items changed, totals are recomputed and, outside
    hydration, the ``cart`` key is written back to the mirror.
    """

    def __init__(self, mirror: CookieMirror, *, tax_rate=None):
        self.mirror = mirror
        rate = settings.TAX_RATE if tax_rate is None else tax_rate
        self.tax_rate = rate if isinstance(rate, Decimal) else Decimal(str(rate))
        self.logger = logger.bind(store="CartStore")
        self._state = CartState()
        self._phase = StorePhase.UNINITIALIZED
        self._hydrate()

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def phase(self) -> StorePhase:
        return self._phase

    def dispatch(self, action: CartAction) -> CartState:
        previous = self._state
        state = cart_reducer(previous, action)
        if state.lines != previous.lines:
            state = cart_reducer(
                state, UpdateOrderSummary(summarize(state.lines, self.tax_rate))
            )
            if self._phase is not StorePhase.HYDRATING:
                self.mirror.set(CART_KEY, dump_cart(state.lines))
        self._state = state
        return state

    # --- hydration ---------------------------------------------------------

    def _hydrate(self) -> None:
        self._phase = StorePhase.HYDRATING
        self.dispatch(HydrateCart(tuple(self._read_cart())))
        address = self._read_address()
        if address is not None:
            self.dispatch(HydrateAddress(address))
        self._phase = StorePhase.READY
        self.logger.debug(
            "Cart hydrated",
            lines=len(self._state.lines),
            has_address=self._state.shipping_address is not None,
        )

    def _read_cart(self):
        raw = self.mirror.get(CART_KEY)
        if not raw:
            return []
        try:
            return parse_cart(raw)
        except (TypeError, ValueError) as exc:
            self.logger.debug("Discarding unreadable cart cookie", error=str(exc))
            return []

    def _read_address(self) -> Optional[ShippingAddress]:
        if not self.mirror.get("firstName"):
            return None
        return address_from_raw({key: self.mirror.get(key) for _, key in ADDRESS_FIELDS})

    # --- actions -----------------------------------------------------------

    def add_product(self, item: CartLineItem) -> CartState:
        self.logger.debug(
            "Adding product", product_id=item.product_id, size=item.size, quantity=item.quantity
        )
        return self.dispatch(AddProduct(item))

    def update_quantity(self, item: CartLineItem) -> CartState:
        self.logger.debug(
            "Setting line quantity", product_id=item.product_id, size=item.size, quantity=item.quantity
        )
        return self.dispatch(SetLineQuantity(item))

    def remove_product(self, product_id: str, size: Optional[str]) -> CartState:
        self.logger.debug("Removing line", product_id=product_id, size=size)
        return self.dispatch(RemoveLine(product_id, size))

    def update_address(self, address: ShippingAddress) -> CartState:
        for key, value in address_to_raw(address).items():
            self.mirror.set(key, value)
        self.logger.info("Shipping address updated", country=address.country)
        return self.dispatch(SetShippingAddress(address))

    def complete_order(self) -> CartState:
        self.logger.info("Order completed; clearing cart", lines=len(self._state.lines))
        return self.dispatch(CompleteOrder())
