from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from store_orders.config import AppConfig, get_config
from store_orders.data.models import (
    CreateOrderRequest,
    Order,
    OrderCreatedEventDetail,
    OrderStatus,
    OrderValidationResult,
    PaymentStatus,
    UKAddress,
    ValidationError,
)
from store_orders.errors import InvalidOrderError
from store_orders.logging import get_logger

from .normalization import normalize_uk_address, normalize_uk_phone
from .order_id import generate_order_id
from .totals import calculate_order_totals
from .utils import (
    Number,
    collect_errors,
    create_field_path,
    create_validation_error,
    format_validation_errors,
    utc_timestamp,
    validate_min_length,
    validate_required_field,
)

logger = get_logger(__name__)

MIN_PHONE_LENGTH = 10
MIN_POSTCODE_LENGTH = 5


def _validate_address(address: UKAddress, prefix: str) -> List[Optional[ValidationError]]:
    return [
        validate_required_field(
            address.line1, create_field_path(prefix, "line1"), "Address line 1 is required"
        ),
        validate_required_field(
            address.city, create_field_path(prefix, "city"), "City is required"
        ),
        validate_min_length(
            address.postcode,
            create_field_path(prefix, "postcode"),
            MIN_POSTCODE_LENGTH,
            "A valid UK postcode is required",
        ),
    ]


def validate_create_order_request(request: CreateOrderRequest) -> OrderValidationResult:
    """Validate the fields of an order request.

    Errors are reported with camelCase field paths, e.g. ``shippingAddress.postcode``.
    """
    checks: List[Optional[ValidationError]] = [
        validate_required_field(request.customer_id, "customerId", "Customer ID is required"),
        validate_min_length(request.email, "email", 1, "Email is required"),
        validate_min_length(request.phone, "phone", MIN_PHONE_LENGTH, "A valid phone number is required"),
        None if request.items else create_validation_error("items", "At least one item is required"),
    ]
    checks.extend(_validate_address(request.shipping_address, "shippingAddress"))
    if request.billing_address is not None:
        checks.extend(_validate_address(request.billing_address, "billingAddress"))

    errors = collect_errors(checks)
    return OrderValidationResult(is_valid=not errors, errors=errors)


def resolve_shipping_cost(subtotal: Number, config: Optional[AppConfig] = None) -> int:
    """Standard shipping cost, or 0 once the subtotal reaches the free shipping threshold."""
    config = config or get_config()
    threshold = config.free_shipping_threshold
    if threshold > 0 and subtotal >= threshold:
        return 0
    return config.standard_shipping_cost


def build_order(
    request: CreateOrderRequest,
    shipping_cost: Optional[Number] = None,
    discount: Number = 0,
    order_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Order:
    """Validate and price a request into a new PENDING order.

    Args:
        request (CreateOrderRequest): The incoming request.
        shipping_cost (int, optional): Net shipping in pence. Resolved from config when None.
        discount (int): Net discount in pence. Defaults to 0.
        order_id (str, optional): Identifier to use. Generated when None.
        now (datetime, optional): Creation time. Defaults to the current UTC time.
    Returns:
        Order: The new order.
    Raises:
        InvalidOrderError: If the request fails validation.
    """
    result = validate_create_order_request(request)
    if not result.is_valid:
        message = format_validation_errors(result.errors)
        logger.warning(f"Rejected order request for customer '{request.customer_id}': {message}")
        raise InvalidOrderError(result.errors, message)

    if shipping_cost is None:
        item_subtotal = sum(item.unit_price * item.quantity for item in request.items)
        shipping_cost = resolve_shipping_cost(item_subtotal)

    totals = calculate_order_totals(request.items, shipping_cost=shipping_cost, discount=discount)
    shipping_address = normalize_uk_address(request.shipping_address)
    billing_address = (
        normalize_uk_address(request.billing_address)
        if request.billing_address is not None
        else shipping_address
    )
    timestamp = utc_timestamp(now)

    order = Order(
        order_id=order_id or generate_order_id(),
        customer_id=request.customer_id,
        email=request.email.strip(),
        phone=normalize_uk_phone(request.phone),
        items=totals.items_with_vat,
        shipping_address=shipping_address,
        billing_address=billing_address,
        subtotal=totals.subtotal,
        total_vat=totals.total_vat,
        shipping_cost=totals.shipping_cost,
        discount=totals.discount,
        grand_total=totals.grand_total,
        status=OrderStatus.PENDING,
        payment_status=PaymentStatus.PENDING,
        notes=request.notes,
        promo_code=request.promo_code,
        shipping_method=request.shipping_method,
        created_at=timestamp,
        updated_at=timestamp,
    )
    logger.debug(f"Built order {order.order_id} with grand total {order.grand_total}")
    return order


def build_order_created_event(order: Order) -> OrderCreatedEventDetail:
    return OrderCreatedEventDetail(
        order_id=order.order_id,
        customer_id=order.customer_id,
        email=order.email,
        items=order.items,
        subtotal=order.subtotal,
        total_vat=order.total_vat,
        grand_total=order.grand_total,
        shipping_address=order.shipping_address,
        status=order.status,
        created_at=order.created_at,
    )
