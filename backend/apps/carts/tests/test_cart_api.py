import json
from unittest.mock import Mock, patch
from urllib.parse import quote, unquote

import httpx
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.views import CartOrderView
from apps.orders.dtos import OrderResult
from apps.orders.gateway import OrderGateway


def line_payload(product_id="A", size="M", price="10.00", quantity=1):
    return {
        "_id": product_id,
        "title": f"Product {product_id}",
        "slug": f"product-{product_id.lower()}",
        "image": f"{product_id}.jpg",
        "gender": "women",
        "size": size,
        "price": price,
        "quantity": quantity,
        "inStock": 5,
    }


ADDRESS = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "address": "12 Analytical St",
    "zip": "10001",
    "city": "London",
    "country": "GB",
    "phone": "555-0100",
}


class CartApiTests(APITestCase):
    def setUp(self):
        self.items_url = reverse("cart-items")

    def cookie_cart(self, response):
        return json.loads(unquote(response.cookies["cart"].value))

    def test_get_empty_cart(self):
        res = self.client.get(reverse("cart-detail"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        body = res.json()
        self.assertTrue(body["isLoaded"])
        self.assertEqual(body["cart"], [])
        self.assertEqual(body["numberOfItems"], 0)
        self.assertIsNone(body["shippingAddress"])
        self.assertNotIn("cart", res.cookies)

    def test_get_with_unrenderable_price_cookie_serves_empty_cart(self):
        self.client.cookies["cart"] = quote(
            '[{"_id":"A","size":"M","price":"1e5000","quantity":1}]', safe=""
        )
        res = self.client.get(reverse("cart-detail"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json()["cart"], [])
        self.assertEqual(res.json()["total"], 0)

    def test_add_rejects_price_with_too_many_digits(self):
        res = self.client.post(
            self.items_url, line_payload(price="12345678901.00"), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_add_merge_and_cookie_persistence(self):
        res = self.client.post(self.items_url, line_payload(quantity=1), format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(self.cookie_cart(res)[0]["_id"], "A")

        res = self.client.post(self.items_url, line_payload(quantity=2), format="json")
        body = res.json()
        self.assertEqual(len(body["cart"]), 1)
        self.assertEqual(body["cart"][0]["quantity"], 3)
        self.assertEqual(body["subTotal"], 30)

        res = self.client.post(self.items_url, line_payload(size="L"), format="json")
        body = res.json()
        self.assertEqual(len(body["cart"]), 2)
        self.assertEqual(body["numberOfItems"], 4)

        res = self.client.get(reverse("cart-detail"))
        self.assertEqual(res.json()["numberOfItems"], 4)

    def test_patch_zero_removes_line(self):
        self.client.post(self.items_url, line_payload(), format="json")
        res = self.client.patch(self.items_url, line_payload(quantity=0), format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json()["cart"], [])
        self.assertEqual(self.cookie_cart(res), [])

    def test_delete_line(self):
        self.client.post(self.items_url, line_payload("A"), format="json")
        self.client.post(self.items_url, line_payload("B"), format="json")
        res = self.client.delete(self.items_url, {"_id": "A", "size": "M"}, format="json")
        self.assertEqual([line["_id"] for line in res.json()["cart"]], ["B"])

    def test_add_rejects_invalid_quantity(self):
        res = self.client.post(self.items_url, line_payload(quantity=0), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.json()["error"]["code"], "VALIDATION_ERROR")

    def test_put_address_sets_cookies(self):
        res = self.client.put(reverse("cart-address"), ADDRESS, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.json()["shippingAddress"]["firstName"], "Ada")
        self.assertEqual(res.cookies["firstName"].value, "Ada")
        self.assertEqual(res.cookies["address"].value, "12%20Analytical%20St")
        self.assertEqual(res.cookies["address2"].value, "")
        self.assertEqual(res.cookies["firstName"]["samesite"], "Lax")

    def test_put_address_requires_fields(self):
        res = self.client.put(reverse("cart-address"), {"firstName": "Ada"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class CartOrderApiTests(APITestCase):
    def setUp(self):
        self.url = reverse("cart-orders")
        self.client.post(reverse("cart-items"), line_payload(quantity=2), format="json")

    def gateway_for(self, handler):
        client = httpx.Client(
            base_url="http://orders.test/api", transport=httpx.MockTransport(handler)
        )
        return OrderGateway(client=client)

    def test_order_without_address_is_rejected(self):
        calls = []
        gateway = self.gateway_for(lambda request: calls.append(request) or httpx.Response(201))
        with patch.object(CartOrderView, "gateway", gateway):
            res = self.client.post(self.url, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(calls, [])
        self.assertEqual(res.json()["error"]["code"], "VALIDATION_ERROR")

    def test_successful_order_clears_cart_cookie(self):
        self.client.put(reverse("cart-address"), ADDRESS, format="json")
        gateway = self.gateway_for(lambda request: httpx.Response(201, json={"_id": "ORD123"}))
        with patch.object(CartOrderView, "gateway", gateway):
            res = self.client.post(self.url, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.json(), {"hasError": False, "message": "ORD123"})
        self.assertEqual(unquote(res.cookies["cart"].value), "[]")

        body = self.client.get(reverse("cart-detail")).json()
        self.assertEqual(body["cart"], [])
        self.assertEqual(body["shippingAddress"]["firstName"], "Ada")

    def test_failed_order_reports_bad_gateway(self):
        self.client.put(reverse("cart-address"), ADDRESS, format="json")
        gateway = Mock()
        gateway.submit_order.return_value = OrderResult(has_error=True, message="boom")
        with patch.object(CartOrderView, "gateway", gateway):
            res = self.client.post(self.url, format="json")
        self.assertEqual(res.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(res.json(), {"hasError": True, "message": "boom"})
        self.assertNotIn("cart", res.cookies)
