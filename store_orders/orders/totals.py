"""
Order total calculation.

Amounts are pence. Item net totals are exact integers; VAT amounts and
anything derived from them are Decimals rounded to two places. Discounts and
shipping are taxed at the standard rate regardless of item rates, and the
discounted subtotal, total VAT and grand total are all floored at zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from store_orders.data.models import OrderItem, OrderItemWithVat, OrderTotals
from store_orders.logging import get_logger

from .utils import Number, round_to_two_decimals

logger = get_logger(__name__)


@dataclass(frozen=True)
class VatRates:
    STANDARD: Decimal
    REDUCED: Decimal
    ZERO: Decimal


UK_VAT_RATES = VatRates(
    STANDARD=Decimal("0.20"),
    REDUCED=Decimal("0.05"),
    ZERO=Decimal("0"),
)

ZERO = Decimal("0")


def _vat_amount(net_amount: Number, vat_rate: Decimal) -> Decimal:
    return round_to_two_decimals(Decimal(str(net_amount)) * vat_rate)


def calculate_vat_for_item(item: OrderItem) -> OrderItemWithVat:
    """Attach VAT figures to a single order line.

    Args:
        item (OrderItem): The line to price. ``vat_rate`` falls back to the standard rate.
    Returns:
        OrderItemWithVat: The line with ``total_price``, ``vat_amount`` and ``total_price_incl_vat``.
    """
    vat_rate = item.vat_rate if item.vat_rate is not None else UK_VAT_RATES.STANDARD
    total_price = item.unit_price * item.quantity
    vat_amount = _vat_amount(total_price, vat_rate)

    return OrderItemWithVat(
        **item.model_dump(include=set(OrderItem.model_fields)),
        vat_amount=vat_amount,
        total_price=total_price,
        total_price_incl_vat=round_to_two_decimals(total_price + vat_amount),
    )


def calculate_order_totals(
    items: Iterable[OrderItem],
    shipping_cost: Number = 0,
    discount: Number = 0,
) -> OrderTotals:
    """Compute the VAT-inclusive totals for an order.

    Args:
        items (Iterable[OrderItem]): Order lines, priced in input order.
        shipping_cost (int | Decimal): Net shipping cost in pence. Defaults to 0.
        discount (int | Decimal): Net discount in pence. May exceed the order value.
    Returns:
        OrderTotals: The computed totals.
    Raises:
        ValueError: If shipping_cost or discount is negative.
    """
    if shipping_cost < 0:
        raise ValueError(f"shipping_cost must not be negative, got {shipping_cost}")
    if discount < 0:
        raise ValueError(f"discount must not be negative, got {discount}")

    items_with_vat: List[OrderItemWithVat] = [calculate_vat_for_item(item) for item in items]

    subtotal = sum((item.total_price for item in items_with_vat), 0)
    items_vat = sum((item.vat_amount for item in items_with_vat), ZERO)

    shipping_vat = _vat_amount(shipping_cost, UK_VAT_RATES.STANDARD)
    discount_vat_reduction = _vat_amount(discount, UK_VAT_RATES.STANDARD)

    discounted_subtotal = max(ZERO, subtotal - Decimal(str(discount)))
    total_vat = round_to_two_decimals(max(ZERO, items_vat + shipping_vat - discount_vat_reduction))
    grand_total = max(
        ZERO,
        round_to_two_decimals(discounted_subtotal + total_vat + Decimal(str(shipping_cost))),
    )

    logger.debug(
        f"Calculated totals for {len(items_with_vat)} items: "
        f"subtotal={subtotal} vat={total_vat} grand_total={grand_total}"
    )

    return OrderTotals(
        items_with_vat=items_with_vat,
        subtotal=round_to_two_decimals(subtotal),
        total_vat=total_vat,
        shipping_cost=round_to_two_decimals(shipping_cost),
        shipping_vat=round_to_two_decimals(shipping_vat),
        discount=round_to_two_decimals(discount),
        grand_total=round_to_two_decimals(grand_total),
    )
