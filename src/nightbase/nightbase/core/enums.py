from __future__ import annotations

from enum import Enum


class RoundingMethod(str, Enum):
    """How a timestamp is snapped to the store's rounding granularity."""

    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"


class GateMode(str, Enum):
    """Policy deciding when a store's previous business day gets closed."""

    HOUR = "hour"
    WATERMARK = "watermark"
