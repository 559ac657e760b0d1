from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

import pytz

from ..core.constants import DEFAULT_BUSINESS_TIMEZONE, DEFAULT_DAY_SWITCH_TIME


@dataclass(frozen=True)
class SwitchTime:
    """Local time-of-day at which a store's business day ends."""

    hour: int
    minute: int = 0


def parse_switch_time(value: Optional[str]) -> Optional[SwitchTime]:
    """Parse a ``HH:MM[:SS]`` string.

    Empty values fall back to the default switch time. Returns None when the
    hour or minute is not a valid integer in range, so callers can skip the
    store instead of failing the whole batch.
    """

    raw = (value or "").strip() or DEFAULT_DAY_SWITCH_TIME
    parts = raw.split(":")

    try:
        hour = int(parts[0])
        minute = int(parts[1]) if len(parts) >= 2 and parts[1] else 0
    except ValueError:
        return None

    if not 0 <= hour <= 23 or not 0 <= minute <= 59:
        return None
    return SwitchTime(hour=hour, minute=minute)


class BusinessCalendar:
    """All day-rollover arithmetic for one business timezone.

    Naive datetimes are taken as already being local wall-clock time.
    """

    def __init__(self, timezone: str = DEFAULT_BUSINESS_TIMEZONE):
        self._tz = pytz.timezone(timezone)

    def to_local(self, instant: datetime) -> datetime:
        if instant.tzinfo is None:
            return self._tz.localize(instant)
        return instant.astimezone(self._tz)

    def local_date_of(self, instant: datetime) -> date:
        return self.to_local(instant).date()

    @staticmethod
    def previous_business_date(day: date) -> date:
        return day - timedelta(days=1)

    def at_switch_time(self, day: date, switch: SwitchTime) -> datetime:
        """The instant ``day`` reaches ``switch`` in local time."""
        # Wall-clock times inside a DST gap are shifted forward to a real instant.
        return self._tz.normalize(self._tz.localize(datetime.combine(day, time(switch.hour, switch.minute))))

    def business_date_of(self, instant: datetime, switch: SwitchTime) -> date:
        # Early-morning hours before the switch still belong to the previous calendar day.
        local = self.to_local(instant)
        if (local.hour, local.minute) < (switch.hour, switch.minute):
            return self.previous_business_date(local.date())
        return local.date()
