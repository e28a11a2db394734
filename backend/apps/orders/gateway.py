from __future__ import annotations

from typing import Optional

import httpx
from rest_framework import status

from apps.api.exceptions import ApplicationError
from apps.carts.state import CartState
from apps.carts.store import CartStore
from apps.common import get_logger
from .dtos import Order, OrderResult

logger = get_logger(__name__).bind(component="orders", layer="gateway")

ORDERS_PATH = "/orders"
UNHANDLED_ERROR_MESSAGE = "Unhandled error, please contact the administrator"


class OrderPreconditionError(ApplicationError):
    """The cart cannot be turned into an order (no address, line without size)."""

    def __init__(self, message: str):
        super().__init__(
            "VALIDATION_ERROR", message, status_code=status.HTTP_400_BAD_REQUEST
        )


def build_order(state: CartState) -> Order:
    if state.shipping_address is None:
        raise OrderPreconditionError("No shipping address has been set")
    for line in state.lines:
        if line.size is None:
            raise OrderPreconditionError(
                f"Cart line {line.product_id} has no size selected"
            )
    return Order(
        order_items=list(state.lines),
        shipping_address=state.shipping_address,
        number_of_items=state.number_of_items,
        sub_total=state.sub_total,
        tax=state.tax,
        total=state.total,
        is_paid=False,
    )


class OrderGateway:
    """Posts the current cart to the order service and reports a tagged result.

    Only :class:`OrderPreconditionError` escapes :meth:`submit_order`; every
    failure after the snapshot is built becomes ``OrderResult(has_error=True)``.
    """

    def __init__(self, client: httpx.Client):
        self.client = client
        self.logger = logger.bind(gateway="OrderGateway")

    def submit_order(self, store: CartStore) -> OrderResult:
        order = build_order(store.state)
        self.logger.info(
            "Submitting order",
            items=order.number_of_items,
            total=order.total,
        )
        try:
            response = self.client.post(ORDERS_PATH, json=order.to_payload())
            response.raise_for_status()
            order_id = self._order_id(response.json())
        except httpx.HTTPError as exc:
            self.logger.warning("Order submission failed", error=str(exc))
            return OrderResult(has_error=True, message=str(exc))
        except Exception:
            self.logger.exception("Order submission failed unexpectedly")
            return OrderResult(has_error=True, message=UNHANDLED_ERROR_MESSAGE)

        store.complete_order()
        self.logger.info("Order created", order_id=order_id)
        return OrderResult(has_error=False, message=order_id)

    @staticmethod
    def _order_id(data) -> str:
        order_id: Optional[object] = data.get("_id") or data.get("id")
        if order_id in (None, ""):
            raise ValueError("Order service response is missing an identifier")
        return str(order_id)
