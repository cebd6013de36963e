from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .orders import Order, OrderStatus


class OrderQueryOptions(BaseModel):
    """Options for listing a customer's orders."""
    limit: Optional[int] = Field(default=None, gt=0, description="Maximum number of orders to read")
    cursor: Optional[str] = Field(default=None, description="Opaque cursor from a previous page")
    status: Optional[OrderStatus] = Field(default=None, description="Only return orders in this status")


class OrderPage(BaseModel):
    """One page of orders plus the cursor for the next page."""
    items: List[Order] = Field(default_factory=list, description="Orders, newest first")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for the next page, None when exhausted")
