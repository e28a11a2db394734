import unittest
from rest_framework import status
from apps.api.utils import error_response


class ErrorResponseTests(unittest.TestCase):
    def test_default_status_mapping_and_details(self):
        resp = error_response("NOT_FOUND", "Product not found", {"slug": "kids_tee"})
        self.assertEqual(resp.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(resp.data["error"]["status"], status.HTTP_404_NOT_FOUND)
        self.assertEqual(resp.data["error"]["details"], {"slug": "kids_tee"})

    def test_code_is_upper_cased_and_unknown_codes_default_to_400(self):
        resp = error_response("cart_error", "Bad cart")
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["error"]["code"], "CART_ERROR")

    def test_custom_status_override_and_hint(self):
        resp = error_response(
            "VALIDATION_ERROR",
            "Shipping address is required",
            http_status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            hint="Save an address before checking out",
        )
        self.assertEqual(resp.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertEqual(resp.data["error"]["hint"], "Save an address before checking out")

    def test_blank_message_is_rejected(self):
        with self.assertRaises(ValueError):
            error_response("NOT_FOUND", "   ")
