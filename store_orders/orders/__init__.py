# Order ID generation
from .order_id import generate_order_id

# UK address and phone normalization
from .normalization import (
    normalize_uk_postcode,
    normalize_uk_phone,
    normalize_uk_address,
    UK_CONSTANTS,
)

# Order total calculations
from .totals import calculate_vat_for_item, calculate_order_totals, UK_VAT_RATES

# Utility functions
from .utils import (
    round_to_two_decimals,
    create_validation_error,
    create_field_path,
    validate_required_field,
    validate_min_length,
    collect_errors,
    format_validation_errors,
)

# Checkout assembly
from .checkout import (
    validate_create_order_request,
    resolve_shipping_cost,
    build_order,
    build_order_created_event,
)

__all__ = [
    "generate_order_id",
    "normalize_uk_postcode",
    "normalize_uk_phone",
    "normalize_uk_address",
    "UK_CONSTANTS",
    "calculate_vat_for_item",
    "calculate_order_totals",
    "UK_VAT_RATES",
    "round_to_two_decimals",
    "create_validation_error",
    "create_field_path",
    "validate_required_field",
    "validate_min_length",
    "collect_errors",
    "format_validation_errors",
    "validate_create_order_request",
    "resolve_shipping_cost",
    "build_order",
    "build_order_created_event",
]
