from __future__ import annotations

from typing import List, Optional, Protocol

from .models import Order, OrderQueryOptions, OrderStatus, PaymentStatus


# ---- Order repository protocol ----

class OrderRepository(Protocol):
    """
    Storage-agnostic contract for persisting orders.

    Consumers implement this for their database; the order calculation
    functions never call it.
    """

    def save(self, order: Order) -> None:
        """Create or replace an order."""
        ...

    def find_by_id(self, order_id: str) -> Optional[Order]:
        """Get an order by id, or None when it does not exist."""
        ...

    def find_by_customer_id(
        self,
        customer_id: str,
        options: Optional[OrderQueryOptions] = None,
    ) -> List[Order]:
        """List a customer's orders, newest first."""
        ...

    def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Set the fulfilment status of an order."""
        ...

    def update_payment_status(self, order_id: str, payment_status: PaymentStatus) -> None:
        """Set the payment status of an order."""
        ...
