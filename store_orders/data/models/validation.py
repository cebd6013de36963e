from __future__ import annotations

from typing import List

from pydantic import Field

from .base import FrozenCamelModel


class ValidationError(FrozenCamelModel):
    """A single field-level validation failure."""
    field: str = Field(description="Dotted path of the offending field")
    message: str = Field(description="Human readable reason")


class OrderValidationResult(FrozenCamelModel):
    """Outcome of validating an order request."""
    is_valid: bool = Field(description="True when no errors were found")
    errors: List[ValidationError] = Field(default_factory=list, description="Errors in discovery order")
