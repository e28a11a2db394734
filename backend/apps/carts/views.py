from typing import Optional

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from apps.orders.container import build_order_gateway
from .container import build_cart_store
from .serializers import (
    CartLineItemSerializer,
    CartLineRemoveSerializer,
    CartQuantitySerializer,
    CartStateSerializer,
    OrderResultSerializer,
    ShippingAddressSerializer,
)
from .store import CartStore

logger = get_logger(__name__).bind(component="carts", layer="view")


class CartAPIView(APIView):
    """Base view owning the request's ``CartStore``.

    Mirror writes made while handling the request are emitted as cookies on
    the outgoing response, whatever its status.
    """

    store_factory = staticmethod(build_cart_store)
    store: Optional[CartStore] = None

    def get_store(self, request) -> CartStore:
        if self.store is None:
            self.store = self.store_factory(request)
        return self.store

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        if self.store is not None:
            self.store.mirror.apply(response)
        return response

    def state_response(self, store: CartStore, http_status=status.HTTP_200_OK):
        return Response(CartStateSerializer(store.state).data, status=http_status)


@extend_schema(tags=["Cart"])
class CartView(CartAPIView):
    log = logger.bind(view="CartView")

    @extend_schema(
        operation_id="cart_retrieve",
        summary="Get cart state",
        description="Cart lines, totals and shipping address hydrated from the shopper's cookies.",
        responses={200: CartStateSerializer},
    )
    def get(self, request):
        store = self.get_store(request)
        self.log.debug("Serving cart state", lines=len(store.state.lines))
        return self.state_response(store)


@extend_schema(tags=["Cart"])
class CartItemsView(CartAPIView):
    log = logger.bind(view="CartItemsView")

    @extend_schema(
        operation_id="cart_items_add",
        summary="Add product to cart",
        description="Merges into the line with the same product and size, otherwise appends a new line.",
        request=CartLineItemSerializer,
        responses={
            200: CartStateSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartLineItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        store = self.get_store(request)
        store.add_product(serializer.to_line_item())
        return self.state_response(store)

    @extend_schema(
        operation_id="cart_items_update",
        summary="Set line quantity",
        description="Replaces the quantity of a matching line. A quantity of zero removes the line.",
        request=CartQuantitySerializer,
        responses={
            200: CartStateSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def patch(self, request):
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        store = self.get_store(request)
        store.update_quantity(serializer.to_line_item())
        return self.state_response(store)

    @extend_schema(
        operation_id="cart_items_remove",
        summary="Remove line from cart",
        request=CartLineRemoveSerializer,
        responses={
            200: CartStateSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request):
        serializer = CartLineRemoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        store = self.get_store(request)
        data = serializer.validated_data
        store.remove_product(data["_id"], data.get("size"))
        return self.state_response(store)


@extend_schema(tags=["Cart"])
class CartAddressView(CartAPIView):
    log = logger.bind(view="CartAddressView")

    @extend_schema(
        operation_id="cart_address_update",
        summary="Set shipping address",
        request=ShippingAddressSerializer,
        responses={
            200: CartStateSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = ShippingAddressSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        store = self.get_store(request)
        store.update_address(serializer.to_address())
        return self.state_response(store)


@extend_schema(tags=["Cart"])
class CartOrderView(CartAPIView):
    gateway = build_order_gateway()
    log = logger.bind(view="CartOrderView")

    @extend_schema(
        operation_id="cart_orders_create",
        summary="Submit order",
        description=(
            "Posts the current cart and shipping address to the order service. On success the cart is "
            "emptied and the order id is returned as the message. Failures of the order service are "
            "reported with hasError=true and a 502 status."
        ),
        request=None,
        responses={
            201: OrderResultSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            502: OrderResultSerializer,
        },
    )
    def post(self, request):
        store = self.get_store(request)
        # OrderPreconditionError is rendered as a 400 by the global exception handler.
        result = self.gateway.submit_order(store)
        http_status = status.HTTP_502_BAD_GATEWAY if result.has_error else status.HTTP_201_CREATED
        return Response(OrderResultSerializer(result).data, status=http_status)
