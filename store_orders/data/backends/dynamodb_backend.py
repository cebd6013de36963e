from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr, Key

from store_orders.logging import get_logger
from store_orders.orders.utils import utc_timestamp

from ..interface import OrderRepository
from ..models import Order, OrderPage, OrderQueryOptions, OrderStatus, PaymentStatus
from .keys import OrderKeyGeneratorConfig, OrderKeyGenerators

logger = get_logger(__name__)


@dataclass
class RepositoryContext:
    """Table name plus a boto3 DynamoDB service resource."""
    table_name: str
    dynamodb: Any = None


@dataclass
class DynamoOrderRepositoryConfig:
    keys: OrderKeyGeneratorConfig = field(default_factory=OrderKeyGeneratorConfig)
    order_entity_type: str = "ORDER"
    gsi1_index: str = "gsi1"


def get_table(ctx: RepositoryContext):
    """Return the boto3 Table for ctx.

    Raises:
        RuntimeError: If the context carries no DynamoDB resource.
    """
    if ctx.dynamodb is None:
        logger.error("RepositoryContext is missing its DynamoDB resource.")
        raise RuntimeError("dynamodb resource is required in RepositoryContext")
    return ctx.dynamodb.Table(ctx.table_name)


def build_update_arguments(key: Dict[str, str], **fields: Any) -> Dict[str, Any]:
    """update_item keyword arguments that SET each of fields on key."""
    names = {f"#{name}": name for name in fields}
    values = {f":{name}": value for name, value in fields.items()}
    assignments = ", ".join(f"#{name} = :{name}" for name in fields)
    return {
        "Key": key,
        "UpdateExpression": f"SET {assignments}",
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values,
    }


def encode_cursor(last_evaluated_key: Optional[Dict[str, Any]]) -> Optional[str]:
    if not last_evaluated_key:
        return None
    raw = json.dumps(last_evaluated_key, sort_keys=True).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_cursor(cursor: str) -> Dict[str, Any]:
    try:
        key = json.loads(base64.urlsafe_b64decode(cursor.encode("ascii")))
    except ValueError as e:
        raise ValueError(f"Invalid order cursor: {cursor!r}") from e
    if not isinstance(key, dict):
        raise ValueError(f"Invalid order cursor: {cursor!r}")
    return key


class DynamoOrderRepository(OrderRepository):
    """
    DynamoDB-backed implementation.
    - Orders live under pk/sk = ORDER#<id>.
    - A GSI (gsi1pk = CUSTOMER#<customer>, gsi1sk = ORDER#<createdAt>) serves per-customer listings.
    - Every call issues exactly one request; retries are left to boto3.
    """

    def __init__(
        self,
        ctx: RepositoryContext,
        config: Optional[DynamoOrderRepositoryConfig] = None,
    ) -> None:
        self.config = config or DynamoOrderRepositoryConfig()
        self.keys = OrderKeyGenerators(self.config.keys)
        self.table = get_table(ctx)
        self.table_name = ctx.table_name

    # ---------- serialization helpers ----------

    def _to_item(self, order: Order) -> Dict[str, Any]:
        return {
            **order.model_dump(by_alias=True, exclude_none=True),
            **self.keys.order(order.order_id),
            **self.keys.order_by_customer(order.customer_id, order.created_at),
            "entityType": self.config.order_entity_type,
        }

    @staticmethod
    def _from_item(item: Dict[str, Any]) -> Order:
        # key and entity attributes are ignored as extra fields
        return Order.model_validate(item)

    # ---------- interface implementation ----------

    def save(self, order: Order) -> None:
        logger.info(f"Saving order {order.order_id} to {self.table_name}")
        self.table.put_item(Item=self._to_item(order))

    def find_by_id(self, order_id: str) -> Optional[Order]:
        result = self.table.get_item(Key=self.keys.order(order_id))
        item = result.get("Item")
        if item is None:
            logger.debug(f"Order {order_id} not found")
            return None
        return self._from_item(item)

    def find_by_customer_id(
        self,
        customer_id: str,
        options: Optional[OrderQueryOptions] = None,
    ) -> List[Order]:
        return self.find_page_by_customer_id(customer_id, options).items

    def find_page_by_customer_id(
        self,
        customer_id: str,
        options: Optional[OrderQueryOptions] = None,
    ) -> OrderPage:
        """Query one page of a customer's orders, newest first."""
        options = options or OrderQueryOptions()
        query: Dict[str, Any] = {
            "IndexName": self.config.gsi1_index,
            "KeyConditionExpression": (
                Key("gsi1pk").eq(self.keys.customer_partition(customer_id))
                & Key("gsi1sk").begins_with(self.keys.order_sort_prefix())
            ),
            "ScanIndexForward": False,
        }
        if options.limit is not None:
            query["Limit"] = options.limit
        if options.status is not None:
            query["FilterExpression"] = Attr("status").eq(OrderStatus(options.status).value)
        if options.cursor:
            query["ExclusiveStartKey"] = decode_cursor(options.cursor)

        result = self.table.query(**query)
        items = [self._from_item(item) for item in result.get("Items", [])]
        logger.debug(f"Found {len(items)} orders for customer {customer_id}")
        return OrderPage(items=items, next_cursor=encode_cursor(result.get("LastEvaluatedKey")))

    def update_status(self, order_id: str, status: OrderStatus) -> None:
        logger.info(f"Updating order {order_id} status to {OrderStatus(status).value}")
        self.table.update_item(
            **build_update_arguments(
                self.keys.order(order_id),
                status=OrderStatus(status).value,
                updatedAt=utc_timestamp(),
            )
        )

    def update_payment_status(self, order_id: str, payment_status: PaymentStatus) -> None:
        logger.info(f"Updating order {order_id} payment status to {PaymentStatus(payment_status).value}")
        self.table.update_item(
            **build_update_arguments(
                self.keys.order(order_id),
                paymentStatus=PaymentStatus(payment_status).value,
                updatedAt=utc_timestamp(),
            )
        )
