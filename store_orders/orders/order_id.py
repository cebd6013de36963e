from __future__ import annotations

import time
import uuid

ORDER_ID_PREFIX = "ORD"


def generate_order_id() -> str:
    """Generate a unique order id: ``ORD-{epoch ms}-{8 uppercase hex chars}``.

    Example:
        >>> generate_order_id()  # doctest: +SKIP
        'ORD-1702567890123-A1B2C3D4'
    """
    timestamp = time.time_ns() // 1_000_000
    suffix = uuid.uuid4().hex[:8].upper()
    return f"{ORDER_ID_PREFIX}-{timestamp}-{suffix}"
