from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_DAY_SWITCH_TIME, DEFAULT_TIME_ROUNDING_MINUTES
from ..core.enums import RoundingMethod


@dataclass(frozen=True)
class StoreCutoverConfig:
    """Domain entity: the auto clock-out settings of one store.

    Read-only for the scheduler; edited from the store settings screens.
    """

    store_id: str
    day_switch_time: str = DEFAULT_DAY_SWITCH_TIME
    auto_clockout_enabled: bool = False
    time_rounding_enabled: bool = False
    time_rounding_method: RoundingMethod = RoundingMethod.ROUND
    time_rounding_minutes: int = DEFAULT_TIME_ROUNDING_MINUTES
