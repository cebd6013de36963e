from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import FrozenCamelModel


class UKAddress(FrozenCamelModel):
    """UK postal address."""
    line1: str = Field(description="First address line")
    line2: Optional[str] = Field(default=None, description="Second address line")
    city: str = Field(description="Town or city")
    county: Optional[str] = Field(default=None, description="County")
    postcode: str = Field(description="Postcode")
    country: str = Field(default="United Kingdom", description="Country name")
