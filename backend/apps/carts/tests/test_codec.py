import json
import unittest
from decimal import Decimal
from unittest.mock import Mock

from apps.carts.codec import (
    address_from_raw,
    address_to_raw,
    dump_cart,
    json_number,
    line_item_from_raw,
    parse_cart,
)
from apps.carts.mirror import CookieMirror
from apps.carts.state import CartLineItem


class CodecTests(unittest.TestCase):
    def test_json_number(self):
        self.assertEqual(json_number(Decimal("10.00")), 10)
        self.assertIsInstance(json_number(Decimal("10.00")), int)
        self.assertEqual(json_number(Decimal("2.5")), 2.5)

    def test_line_item_accepts_id_alias(self):
        item = line_item_from_raw({"id": 7, "size": "M", "price": "9.90", "quantity": 2})
        self.assertEqual(item.product_id, "7")
        self.assertEqual(item.price, Decimal("9.90"))

    def test_line_item_rejects_malformed(self):
        for raw in ([], {"price": 1}, {"_id": "a", "quantity": "x"}, {"_id": "a", "price": "abc"}):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    line_item_from_raw(raw)

    def test_dump_uses_storefront_keys(self):
        item = CartLineItem("A", None, Decimal("3"), 1, title="Tee", in_stock=4)
        data = json.loads(dump_cart([item]))
        self.assertEqual(
            data,
            [{"_id": "A", "title": "Tee", "slug": "", "image": "", "gender": "",
              "size": None, "price": 3, "quantity": 1, "inStock": 4}],
        )

    def test_line_item_price_bounds(self):
        for price in ("1e5000", "-0.01", "10000000000", "1.001", "NaN"):
            with self.subTest(price=price):
                with self.assertRaises(ValueError):
                    line_item_from_raw({"_id": "A", "price": price, "quantity": 1})
        item = line_item_from_raw({"_id": "A", "price": "9999999999.99", "quantity": 1})
        self.assertEqual(item.price, Decimal("9999999999.99"))

    def test_line_item_quantity_must_be_positive(self):
        for quantity in (0, -3, 10 ** 9 + 1):
            with self.subTest(quantity=quantity):
                with self.assertRaises(ValueError):
                    line_item_from_raw({"_id": "A", "price": 1, "quantity": quantity})

    def test_parse_rejects_deep_nesting(self):
        with self.assertRaises(ValueError):
            parse_cart("[" * 1300 + "]" * 1300)

    def test_parse_requires_list(self):
        with self.assertRaises(ValueError):
            parse_cart('{"_id": "A"}')
        with self.assertRaises(ValueError):
            parse_cart("{broken")

    def test_address_round_trip_fills_missing(self):
        address = address_from_raw({"firstName": "Ada", "zip": None})
        self.assertEqual(address.first_name, "Ada")
        self.assertEqual(address.zip, "")
        self.assertEqual(address_to_raw(address)["firstName"], "Ada")


class CookieMirrorTests(unittest.TestCase):
    def test_reads_decode_and_pending_overlays(self):
        mirror = CookieMirror({"city": "New%20York"}, max_age=60)
        self.assertEqual(mirror.get("city"), "New York")
        mirror.set("city", "Boston")
        self.assertEqual(mirror.get("city"), "Boston")
        self.assertIsNone(mirror.get("zip"))

    def test_apply_sets_encoded_cookies_and_clears_pending(self):
        mirror = CookieMirror(max_age=60)
        mirror.set("cart", '[{"_id":"A"}]')
        response = Mock()
        mirror.apply(response)
        response.set_cookie.assert_called_once_with(
            "cart",
            "%5B%7B%22_id%22%3A%22A%22%7D%5D",
            max_age=60,
            path="/",
            samesite="Lax",
            httponly=False,
        )
        self.assertEqual(mirror.pending, {})
        self.assertEqual(mirror.get("cart"), '[{"_id":"A"}]')

    def test_apply_without_writes_sets_nothing(self):
        response = Mock()
        CookieMirror(max_age=60).apply(response)
        response.set_cookie.assert_not_called()
