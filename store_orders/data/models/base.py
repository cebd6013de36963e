from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (storage and event payloads)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class FrozenCamelModel(CamelModel):
    """Immutable value object variant of CamelModel."""
    model_config = ConfigDict(frozen=True)
