"""UK order utilities: VAT totals, normalization, validation and order storage contracts.

The DynamoDB implementation lives in ``store_orders.data.backends``.
"""
from .data.models import (
    OrderItem,
    OrderItemWithVat,
    UKAddress,
    CreateOrderRequest,
    Order,
    OrderCreatedEventDetail,
    OrderTotals,
    ValidationError,
    OrderValidationResult,
    OrderQueryOptions,
    OrderPage,
    OrderStatus,
    PaymentStatus,
    ShippingMethod,
)
from .data.interface import OrderRepository
from .errors import InvalidOrderError
from .orders import *  # noqa: F401,F403
from .orders import __all__ as _orders_all

__all__ = [
    "OrderItem",
    "OrderItemWithVat",
    "UKAddress",
    "CreateOrderRequest",
    "Order",
    "OrderCreatedEventDetail",
    "OrderTotals",
    "ValidationError",
    "OrderValidationResult",
    "OrderQueryOptions",
    "OrderPage",
    "OrderStatus",
    "PaymentStatus",
    "ShippingMethod",
    "OrderRepository",
    "InvalidOrderError",
    *_orders_all,
]
