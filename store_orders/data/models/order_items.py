from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base import FrozenCamelModel


class OrderItem(FrozenCamelModel):
    """Order line before VAT calculation."""
    product_id: str = Field(description="Product identifier")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit code")
    name: str = Field(description="Product name")
    description: Optional[str] = Field(default=None, description="Product description")
    quantity: int = Field(gt=0, description="Quantity ordered")
    unit_price: int = Field(ge=0, description="Unit price in pence")
    vat_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=1,
        description="VAT rate as decimal (0.2 for 20%); standard rate when omitted",
    )


class OrderItemWithVat(OrderItem):
    """Order line with calculated VAT amounts."""
    vat_amount: Decimal = Field(description="VAT amount in pence")
    total_price: int = Field(description="Line total excluding VAT in pence (qty * unit_price)")
    total_price_incl_vat: Decimal = Field(description="Line total including VAT in pence")
