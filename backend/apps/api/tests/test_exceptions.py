from django.db.utils import OperationalError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.post("/api/cart/orders/")
    exc = ApplicationError(
        "BAD_GATEWAY",
        "Order service unreachable",
        details={"endpoint": "/orders"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert payload["code"] == "BAD_GATEWAY"
    assert payload["message"] == "Order service unreachable"
    assert payload["details"] == {"endpoint": "/orders"}


def test_validation_error_preserves_details():
    request = factory.put("/api/cart/address/", data={})
    exc = ValidationError({"firstName": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"firstName": ["This field is required."]}


def test_http404_maps_to_not_found():
    request = factory.get("/api/products/missing/")
    response = global_exception_handler(Http404("nope"), _context(request))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["error"]["code"] == "NOT_FOUND"


def test_data_source_failure_returns_generic_message():
    request = factory.get("/api/products/")
    response = global_exception_handler(
        OperationalError("connection refused"), _context(request)
    )
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
