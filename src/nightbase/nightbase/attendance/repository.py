from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def query_open(self, work_date: date) -> Sequence[AttendanceRecord]:
        """Time cards for ``work_date`` with no clock-out, across all stores."""

        raise NotImplementedError

    def close(
        self,
        *,
        time_card_id: str,
        clock_out: datetime,
        scheduled_end_time: Optional[datetime],
        forgot_clockout: bool = True,
    ) -> bool:
        """Close one open time card.

        Returns False when nothing was updated (unknown id or already closed).
        """

        raise NotImplementedError
