from decimal import Decimal

import pytest

from store_orders.data.backends.dynamodb_backend import RepositoryContext
from store_orders.data.models import Order, OrderItemWithVat, UKAddress


class MockTable:
    """Records boto3 Table calls and serves canned responses."""
    def __init__(self, name):
        self.name = name
        self.calls = []
        self.items = {}
        self.query_response = {"Items": []}

    def put_item(self, **kwargs):
        self.calls.append(("put_item", kwargs))
        item = kwargs["Item"]
        self.items[(item["pk"], item["sk"])] = item
        return {}

    def get_item(self, **kwargs):
        self.calls.append(("get_item", kwargs))
        key = kwargs["Key"]
        item = self.items.get((key["pk"], key["sk"]))
        return {"Item": item} if item is not None else {}

    def query(self, **kwargs):
        self.calls.append(("query", kwargs))
        return self.query_response

    def update_item(self, **kwargs):
        self.calls.append(("update_item", kwargs))
        return {}


class MockDynamoResource:
    def __init__(self):
        self.tables = {}

    def Table(self, name):
        return self.tables.setdefault(name, MockTable(name))


@pytest.fixture
def dynamodb():
    return MockDynamoResource()


@pytest.fixture
def ctx(dynamodb):
    return RepositoryContext(table_name="orders-test", dynamodb=dynamodb)


@pytest.fixture
def table(dynamodb):
    return dynamodb.Table("orders-test")


@pytest.fixture
def order():
    address = UKAddress(line1="1 High St", city="Leeds", postcode="LS1 1UR", country="United Kingdom")
    return Order(
        order_id="ORD-1702567890123-A1B2C3D4",
        customer_id="cust-42",
        email="jo@example.co.uk",
        phone="+447123456789",
        items=[
            OrderItemWithVat(
                product_id="p1",
                name="Mug",
                quantity=2,
                unit_price=1000,
                vat_amount=Decimal("400.00"),
                total_price=2000,
                total_price_incl_vat=Decimal("2400.00"),
            )
        ],
        shipping_address=address,
        billing_address=address,
        subtotal=Decimal("2000.00"),
        total_vat=Decimal("400.00"),
        shipping_cost=Decimal("0.00"),
        discount=Decimal("0.00"),
        grand_total=Decimal("2400.00"),
        created_at="2024-05-04T12:00:00.000Z",
        updated_at="2024-05-04T12:00:00.000Z",
    )
