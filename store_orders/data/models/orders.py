from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .addresses import UKAddress
from .base import CamelModel, FrozenCamelModel
from .order_items import OrderItem, OrderItemWithVat


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class ShippingMethod(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    NEXT_DAY = "nextDay"


class CreateOrderRequest(CamelModel):
    """Incoming order creation request, validated by the checkout helpers."""
    customer_id: str = Field(default="", description="Customer placing the order")
    email: str = Field(default="", description="Contact email")
    phone: str = Field(default="", description="Contact phone, any UK format")
    items: List[OrderItem] = Field(default_factory=list, description="Ordered items")
    shipping_address: UKAddress = Field(description="Delivery address")
    billing_address: Optional[UKAddress] = Field(default=None, description="Billing address, defaults to shipping")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    promo_code: Optional[str] = Field(default=None, description="Applied promotion code")
    shipping_method: Optional[ShippingMethod] = Field(default=None, description="Requested shipping method")


class Order(CamelModel):
    """Persisted order document. Amounts in pence."""
    order_id: str = Field(description="Unique order identifier (ORD-<ms>-<suffix>)")
    customer_id: str = Field(description="Customer who placed the order")
    email: str = Field(description="Contact email")
    phone: str = Field(description="Contact phone in international format")
    items: List[OrderItemWithVat] = Field(description="Ordered items with VAT")
    shipping_address: UKAddress = Field(description="Delivery address")
    billing_address: UKAddress = Field(description="Billing address")
    subtotal: Decimal = Field(description="Subtotal excluding VAT")
    total_vat: Decimal = Field(description="Total VAT")
    shipping_cost: Decimal = Field(description="Shipping cost")
    discount: Decimal = Field(description="Discount")
    grand_total: Decimal = Field(description="Grand total including VAT")
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Fulfilment status")
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING, description="Payment status")
    notes: Optional[str] = Field(default=None, description="Free text notes")
    promo_code: Optional[str] = Field(default=None, description="Applied promotion code")
    shipping_method: Optional[ShippingMethod] = Field(default=None, description="Shipping method")
    created_at: str = Field(description="Creation timestamp (ISO-8601, UTC)")
    updated_at: str = Field(description="Last update timestamp (ISO-8601, UTC)")


class OrderCreatedEventDetail(FrozenCamelModel):
    """Detail payload published when an order is created."""
    order_id: str
    customer_id: str
    email: str
    items: List[OrderItemWithVat]
    subtotal: Decimal
    total_vat: Decimal
    grand_total: Decimal
    shipping_address: UKAddress
    status: OrderStatus
    created_at: str
