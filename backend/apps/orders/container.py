from __future__ import annotations

import httpx
from django.conf import settings

from .gateway import OrderGateway


def build_order_client() -> httpx.Client:
    return httpx.Client(
        base_url=settings.ORDERS_API_URL,
        timeout=settings.ORDERS_API_TIMEOUT,
        headers={"Accept": "application/json"},
    )


def build_order_gateway() -> OrderGateway:
    return OrderGateway(client=build_order_client())
