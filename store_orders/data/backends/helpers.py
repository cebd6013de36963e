"""
Standalone order updates that work without a repository instance.

Useful for payment webhooks and other services that only hold a table
context.
"""
from __future__ import annotations

from typing import Optional

from store_orders.logging import get_logger
from store_orders.orders.utils import utc_timestamp

from ..models import OrderStatus, PaymentStatus
from .dynamodb_backend import RepositoryContext, build_update_arguments, get_table
from .keys import OrderKeyGeneratorConfig, OrderKeyGenerators

logger = get_logger(__name__)


def update_order_payment_status(
    ctx: RepositoryContext,
    order_id: str,
    payment_status: PaymentStatus,
    config: Optional[OrderKeyGeneratorConfig] = None,
) -> None:
    """Set the payment status of an order.

    Raises:
        RuntimeError: If ctx carries no DynamoDB resource.
    """
    table = get_table(ctx)
    keys = OrderKeyGenerators(config)
    logger.info(f"Updating order {order_id} payment status to {PaymentStatus(payment_status).value}")
    table.update_item(
        **build_update_arguments(
            keys.order(order_id),
            paymentStatus=PaymentStatus(payment_status).value,
            updatedAt=utc_timestamp(),
        )
    )


def update_order_status_and_payment(
    ctx: RepositoryContext,
    order_id: str,
    order_status: OrderStatus,
    payment_status: PaymentStatus,
    config: Optional[OrderKeyGeneratorConfig] = None,
) -> None:
    """Set order and payment status in a single update_item call."""
    table = get_table(ctx)
    keys = OrderKeyGenerators(config)
    logger.info(
        f"Updating order {order_id} to status {OrderStatus(order_status).value} "
        f"and payment status {PaymentStatus(payment_status).value}"
    )
    table.update_item(
        **build_update_arguments(
            keys.order(order_id),
            status=OrderStatus(order_status).value,
            paymentStatus=PaymentStatus(payment_status).value,
            updatedAt=utc_timestamp(),
        )
    )
