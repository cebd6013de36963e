from __future__ import annotations

from typing import Literal

import boto3

from store_orders.config import get_config

from .backends.dynamodb_backend import (
    DynamoOrderRepository,
    DynamoOrderRepositoryConfig,
    RepositoryContext,
)
from .backends.keys import OrderKeyGeneratorConfig
from .interface import OrderRepository


def get_repository_context() -> RepositoryContext:
    """Build a RepositoryContext for the configured orders table."""
    config = get_config()
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=config.aws_region,
        endpoint_url=config.dynamodb_endpoint_url,
    )
    return RepositoryContext(table_name=config.orders_table_name, dynamodb=dynamodb)


def get_order_repository(kind: Literal["dynamodb"] = "dynamodb") -> OrderRepository:
    if kind == "dynamodb":
        config = get_config()
        return DynamoOrderRepository(
            get_repository_context(),
            DynamoOrderRepositoryConfig(
                keys=OrderKeyGeneratorConfig(
                    order_prefix=config.order_key_prefix,
                    customer_prefix=config.customer_key_prefix,
                ),
                order_entity_type=config.order_entity_type,
                gsi1_index=config.orders_gsi1_index,
            ),
        )
    raise ValueError(f"Unknown order repository kind: {kind}")
