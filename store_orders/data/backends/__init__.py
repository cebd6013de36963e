from .keys import OrderKeyGeneratorConfig, OrderKeyGenerators
from .dynamodb_backend import (
    DynamoOrderRepository,
    DynamoOrderRepositoryConfig,
    RepositoryContext,
)
from .helpers import update_order_payment_status, update_order_status_and_payment

__all__ = [
    # Key generators
    "OrderKeyGeneratorConfig",
    "OrderKeyGenerators",
    # Repository
    "DynamoOrderRepository",
    "DynamoOrderRepositoryConfig",
    "RepositoryContext",
    # Helpers
    "update_order_payment_status",
    "update_order_status_and_payment",
]
