from datetime import datetime, timezone
from decimal import Decimal

import pytest

from store_orders import config as config_module
from store_orders.config import get_config, set_config_for_test
from store_orders.data.models import (
    CreateOrderRequest,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    ShippingMethod,
    UKAddress,
)
from store_orders.errors import InvalidOrderError
from store_orders.orders.checkout import (
    build_order,
    build_order_created_event,
    resolve_shipping_cost,
    validate_create_order_request,
)

NOW = datetime(2024, 5, 4, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config", None)
    set_config_for_test(free_shipping_threshold=5000, standard_shipping_cost=399)
    yield


def make_request(**overrides):
    data = {
        "customer_id": "cust-42",
        "email": "jo@example.co.uk",
        "phone": "07123 456789",
        "items": [OrderItem(product_id="p1", name="Mug", quantity=2, unit_price=1000)],
        "shipping_address": UKAddress(line1="1 High St", city="Leeds", postcode="ls11ur", country="England"),
    }
    data.update(overrides)
    return CreateOrderRequest(**data)


def test_valid_request():
    result = validate_create_order_request(make_request())
    assert result.is_valid
    assert result.errors == []


def test_invalid_request_reports_fields_in_order():
    request = make_request(
        customer_id="",
        email="",
        phone="0712",
        items=[],
        shipping_address=UKAddress(line1="", city="", postcode="ls1"),
    )
    result = validate_create_order_request(request)
    assert not result.is_valid
    assert [error.field for error in result.errors] == [
        "customerId",
        "email",
        "phone",
        "items",
        "shippingAddress.line1",
        "shippingAddress.city",
        "shippingAddress.postcode",
    ]


def test_billing_address_is_validated_when_present():
    request = make_request(billing_address=UKAddress(line1="2 Low St", city="York", postcode=""))
    result = validate_create_order_request(request)
    assert [error.field for error in result.errors] == ["billingAddress.postcode"]


def test_request_accepts_camel_case_payload():
    request = CreateOrderRequest.model_validate(
        {
            "customerId": "cust-1",
            "email": "a@b.co",
            "phone": "07000000000",
            "items": [{"productId": "p1", "name": "Mug", "quantity": 1, "unitPrice": 500, "vatRate": 0.05}],
            "shippingAddress": {"line1": "1 High St", "city": "Leeds", "postcode": "LS1 1UR"},
            "shippingMethod": "nextDay",
        }
    )
    assert request.items[0].unit_price == 500
    assert request.items[0].vat_rate == Decimal("0.05")
    assert request.shipping_method == ShippingMethod.NEXT_DAY


def test_resolve_shipping_cost():
    assert resolve_shipping_cost(4999) == 399
    assert resolve_shipping_cost(5000) == 0


def test_resolve_shipping_cost_without_threshold():
    set_config_for_test(free_shipping_threshold=0, standard_shipping_cost=250)
    assert resolve_shipping_cost(1_000_000) == 250


def test_resolve_shipping_cost_with_explicit_config():
    config = get_config().model_copy(update={"standard_shipping_cost": 99})
    assert resolve_shipping_cost(100, config) == 99


def test_build_order():
    order = build_order(make_request(notes="Leave in porch"), order_id="ORD-1-ABCDEF12", now=NOW)
    assert order.order_id == "ORD-1-ABCDEF12"
    assert order.customer_id == "cust-42"
    assert order.phone == "+447123456789"
    assert order.shipping_address.postcode == "LS1 1UR"
    assert order.shipping_address.country == "United Kingdom"
    assert order.billing_address == order.shipping_address
    assert order.subtotal == 2000
    assert order.shipping_cost == 399
    assert order.total_vat == Decimal("479.80")
    assert order.grand_total == Decimal("2878.80")
    assert order.status == OrderStatus.PENDING
    assert order.payment_status == PaymentStatus.PENDING
    assert order.notes == "Leave in porch"
    assert order.created_at == order.updated_at == "2024-05-04T12:00:00.000Z"


def test_build_order_free_shipping_over_threshold():
    request = make_request(items=[OrderItem(product_id="p1", name="Kettle", quantity=1, unit_price=6000)])
    order = build_order(request, now=NOW)
    assert order.shipping_cost == 0
    assert order.grand_total == 7200


def test_build_order_explicit_shipping_and_discount():
    order = build_order(make_request(), shipping_cost=500, discount=200, now=NOW)
    assert order.shipping_cost == 500
    assert order.discount == 200
    # 400 item VAT + 100 shipping VAT - 40 relief
    assert order.total_vat == 460
    assert order.grand_total == 1800 + 460 + 500


def test_build_order_generates_id():
    order = build_order(make_request(), now=NOW)
    assert order.order_id.startswith("ORD-")


def test_build_order_normalizes_billing_address():
    billing = UKAddress(line1="2 Low St", city="York", postcode="yo17hh")
    order = build_order(make_request(billing_address=billing), now=NOW)
    assert order.billing_address.postcode == "YO1 7HH"
    assert order.shipping_address.postcode == "LS1 1UR"


def test_build_order_rejects_invalid_request():
    with pytest.raises(InvalidOrderError) as exc_info:
        build_order(make_request(email="", items=[]))
    assert [error.field for error in exc_info.value.errors] == ["email", "items"]
    assert str(exc_info.value) == "email: Email is required, items: At least one item is required"
    assert isinstance(exc_info.value, ValueError)


def test_build_order_rejects_blank_email():
    with pytest.raises(InvalidOrderError) as exc_info:
        build_order(make_request(email="   "), shipping_cost=0, now=NOW)
    assert [error.field for error in exc_info.value.errors] == ["email"]


def test_order_created_event():
    order = build_order(make_request(), order_id="ORD-1-ABCDEF12", now=NOW)
    event = build_order_created_event(order)
    assert event.order_id == order.order_id
    assert event.grand_total == order.grand_total
    assert event.status == OrderStatus.PENDING

    payload = event.model_dump(by_alias=True, mode="json")
    assert payload["orderId"] == "ORD-1-ABCDEF12"
    assert payload["customerId"] == "cust-42"
    assert payload["status"] == "PENDING"
    assert payload["items"][0]["totalPriceInclVat"] == "2400.00"
    assert payload["shippingAddress"]["postcode"] == "LS1 1UR"
    assert payload["createdAt"] == "2024-05-04T12:00:00.000Z"
