from __future__ import annotations

import re
from dataclasses import dataclass

from store_orders.data.models import UKAddress


@dataclass(frozen=True)
class _UKConstants:
    COUNTRY: str = "United Kingdom"
    COUNTRY_CODE: str = "+44"
    POSTCODE_INWARD_LENGTH: int = 3


UK_CONSTANTS = _UKConstants()

PHONE_FORMATTING_PATTERN = re.compile(r"[\s().\-/]")
WHITESPACE_PATTERN = re.compile(r"\s")
UK_LOCAL_PREFIX = "0"


def normalize_uk_postcode(postcode: str) -> str:
    """Uppercase and re-space a postcode, e.g. ``sw1a1aa`` -> ``SW1A 1AA``."""
    cleaned = WHITESPACE_PATTERN.sub("", postcode).upper()
    split_at = len(cleaned) - UK_CONSTANTS.POSTCODE_INWARD_LENGTH
    # shorter than the inward code: everything lands in the inward part
    outward, inward = cleaned[:max(split_at, 0)], cleaned[max(split_at, 0):]
    return f"{outward} {inward}"


def normalize_uk_phone(phone: str) -> str:
    """Strip formatting characters and convert a leading 0 to +44."""
    cleaned = PHONE_FORMATTING_PATTERN.sub("", phone)
    if cleaned.startswith(UK_LOCAL_PREFIX):
        return UK_CONSTANTS.COUNTRY_CODE + cleaned[1:]
    return cleaned


def normalize_uk_address(address: UKAddress) -> UKAddress:
    return address.model_copy(
        update={
            "postcode": normalize_uk_postcode(address.postcode),
            "country": UK_CONSTANTS.COUNTRY,
        }
    )
