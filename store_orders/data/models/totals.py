from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import Field

from .base import FrozenCamelModel
from .order_items import OrderItemWithVat


class OrderTotals(FrozenCamelModel):
    """Calculated order totals, all amounts in pence."""
    items_with_vat: List[OrderItemWithVat] = Field(description="Items with VAT, in input order")
    subtotal: Decimal = Field(description="Item subtotal excluding VAT")
    total_vat: Decimal = Field(description="Total VAT after discount relief")
    shipping_cost: Decimal = Field(description="Shipping cost excluding VAT")
    shipping_vat: Decimal = Field(description="VAT charged on shipping")
    discount: Decimal = Field(description="Discount applied")
    grand_total: Decimal = Field(description="Amount payable including VAT")
