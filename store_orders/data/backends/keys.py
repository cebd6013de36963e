"""
DynamoDB key generators for order items.

Prefixes are configurable so several businesses can share one table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class OrderKeyGeneratorConfig:
    order_prefix: str = "ORDER"
    customer_prefix: str = "CUSTOMER"


class OrderKeyGenerators:
    """Builds primary and GSI keys for order entities.

    >>> OrderKeyGenerators().order("ORD-123")
    {'pk': 'ORDER#ORD-123', 'sk': 'ORDER#ORD-123'}
    """

    def __init__(self, config: OrderKeyGeneratorConfig = None) -> None:
        config = config or OrderKeyGeneratorConfig()
        self.order_prefix = config.order_prefix
        self.customer_prefix = config.customer_prefix

    def order(self, order_id: str) -> Dict[str, str]:
        key = f"{self.order_prefix}#{order_id}"
        return {"pk": key, "sk": key}

    def order_by_customer(self, customer_id: str, created_at: str) -> Dict[str, str]:
        return {
            "gsi1pk": self.customer_partition(customer_id),
            "gsi1sk": f"{self.order_prefix}#{created_at}",
        }

    def customer_partition(self, customer_id: str) -> str:
        return f"{self.customer_prefix}#{customer_id}"

    def order_sort_prefix(self) -> str:
        return f"{self.order_prefix}#"
