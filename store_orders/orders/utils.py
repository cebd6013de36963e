from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Union

from store_orders.data.models import ValidationError

TWO_PLACES = Decimal("0.01")

Number = Union[int, float, Decimal]


def round_to_two_decimals(value: Number) -> Decimal:
    """Round to the nearest 0.01, halves away from zero.

    Floats go through their shortest repr so 10.455 rounds to 10.46 rather
    than to the binary neighbour 10.4549999...
    """
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_validation_error(field: str, message: str) -> ValidationError:
    return ValidationError(field=field, message=message)


def create_field_path(prefix: Optional[str], field: str) -> str:
    return f"{prefix}.{field}" if prefix else field


def _is_empty(value: Optional[str]) -> bool:
    return not value


def _is_too_short(value: str, min_length: int) -> bool:
    return len(value.strip()) < min_length


def validate_required_field(
    value: Optional[str],
    field_name: str,
    error_message: str,
) -> Optional[ValidationError]:
    """Return an error when value is missing or empty, otherwise None."""
    if _is_empty(value):
        return create_validation_error(field_name, error_message)
    return None


def validate_min_length(
    value: Optional[str],
    field_name: str,
    min_length: int,
    error_message: str,
) -> Optional[ValidationError]:
    """Return an error when value is missing or shorter than min_length once stripped."""
    if _is_empty(value) or _is_too_short(value, min_length):
        return create_validation_error(field_name, error_message)
    return None


def collect_errors(errors: Iterable[Optional[ValidationError]]) -> List[ValidationError]:
    return [error for error in errors if error is not None]


def format_validation_errors(errors: Iterable[ValidationError]) -> str:
    return ", ".join(f"{error.field}: {error.message}" for error in errors)
