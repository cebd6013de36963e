from decimal import Decimal

import pydantic
import pytest

from store_orders.data.models import (
    OrderItem,
    OrderQueryOptions,
    OrderStatus,
    OrderValidationResult,
    UKAddress,
    ValidationError,
)


def test_item_is_immutable():
    item = OrderItem(product_id="p1", name="Mug", quantity=1, unit_price=500)
    with pytest.raises(pydantic.ValidationError):
        item.quantity = 3


def test_item_dumps_camel_case():
    item = OrderItem(product_id="p1", name="Mug", quantity=1, unit_price=500, vat_rate=Decimal("0.05"))
    assert item.model_dump(by_alias=True, exclude_none=True) == {
        "productId": "p1",
        "name": "Mug",
        "quantity": 1,
        "unitPrice": 500,
        "vatRate": Decimal("0.05"),
    }


def test_address_defaults_country():
    address = UKAddress(line1="1 High St", city="Leeds", postcode="LS1 1UR")
    assert address.country == "United Kingdom"


def test_query_options_limit_must_be_positive():
    with pytest.raises(pydantic.ValidationError):
        OrderQueryOptions(limit=0)


def test_query_options_status_from_string():
    assert OrderQueryOptions(status="SHIPPED").status == OrderStatus.SHIPPED


def test_validation_result_defaults():
    result = OrderValidationResult(is_valid=True)
    assert result.errors == []
    failed = OrderValidationResult(is_valid=False, errors=[ValidationError(field="email", message="Required")])
    assert failed.model_dump(by_alias=True) == {
        "isValid": False,
        "errors": [{"field": "email", "message": "Required"}],
    }
