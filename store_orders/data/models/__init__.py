from .order_items import OrderItem, OrderItemWithVat
from .addresses import UKAddress
from .totals import OrderTotals
from .validation import ValidationError, OrderValidationResult
from .orders import (
    OrderStatus,
    PaymentStatus,
    ShippingMethod,
    CreateOrderRequest,
    Order,
    OrderCreatedEventDetail,
)
from .queries import OrderQueryOptions, OrderPage

__all__ = [
    # Items and totals
    "OrderItem",
    "OrderItemWithVat",
    "OrderTotals",
    # Addresses
    "UKAddress",
    # Validation
    "ValidationError",
    "OrderValidationResult",
    # Orders
    "OrderStatus",
    "PaymentStatus",
    "ShippingMethod",
    "CreateOrderRequest",
    "Order",
    "OrderCreatedEventDetail",
    # Queries
    "OrderQueryOptions",
    "OrderPage",
]
