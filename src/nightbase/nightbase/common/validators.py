from __future__ import annotations

from typing import Any

from ..core.constants import DEFAULT_TIME_ROUNDING_MINUTES
from ..core.enums import GateMode, RoundingMethod
from ..core.exceptions import ValidationError


def rounding_method_or_default(value: Any) -> RoundingMethod:
    """Unknown or empty methods fall through to plain rounding."""
    if isinstance(value, RoundingMethod):
        return value
    try:
        return RoundingMethod(str(value).strip().lower())
    except ValueError:
        return RoundingMethod.ROUND


def rounding_minutes_or_default(value: Any) -> int:
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        return DEFAULT_TIME_ROUNDING_MINUTES
    return minutes if minutes > 0 else DEFAULT_TIME_ROUNDING_MINUTES


def require_gate_mode(value: GateMode | str) -> GateMode:
    if isinstance(value, GateMode):
        return value
    try:
        return GateMode(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in GateMode)
        raise ValidationError(f"AUTO_CLOCKOUT_GATE must be one of: {allowed} (got {value!r})") from None
