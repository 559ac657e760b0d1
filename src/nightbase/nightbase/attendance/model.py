from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one time card.

    ``work_date`` is the business date the shift counts towards, which can be
    the calendar day before ``clock_in`` for after-midnight starts.
    """

    time_card_id: str
    user_id: str
    work_date: date
    clock_in: datetime
    clock_out: Optional[datetime] = None
    scheduled_end_time: Optional[datetime] = None
    forgot_clockout: bool = False

    @property
    def is_open(self) -> bool:
        return self.clock_out is None
