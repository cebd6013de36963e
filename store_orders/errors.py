from __future__ import annotations

from typing import List

from store_orders.data.models import ValidationError


class InvalidOrderError(ValueError):
    """Raised when an order request fails field validation."""

    def __init__(self, errors: List[ValidationError], message: str) -> None:
        super().__init__(message)
        self.errors = errors
