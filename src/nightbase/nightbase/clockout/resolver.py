from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.business_calendar import BusinessCalendar, parse_switch_time
from ..stores.model import StoreCutoverConfig
from .model import CutoverDecision


class CutoverResolver:
    """Turns a store's day switch time plus "now" into a cutover decision."""

    def __init__(self, calendar: BusinessCalendar):
        self._calendar = calendar

    def resolve(self, config: StoreCutoverConfig, now: datetime) -> Optional[CutoverDecision]:
        """Hour gate: act only during the local hour of the store's switch time.

        With an hourly trigger this fires once per store per day and always
        closes yesterday's business day at today's switch instant. Returns
        None to skip (other hour, or a switch time that does not parse).
        """

        switch = parse_switch_time(config.day_switch_time)
        if switch is None:
            return None

        local_now = self._calendar.to_local(now)
        if local_now.hour != switch.hour:
            return None

        today = local_now.date()
        return CutoverDecision(
            cutover_instant=self._calendar.at_switch_time(today, switch),
            target_business_date=self._calendar.previous_business_date(today),
        )

    def latest_ended(self, config: StoreCutoverConfig, now: datetime) -> Optional[CutoverDecision]:
        """The most recent business day whose cutover is at or before ``now``."""

        switch = parse_switch_time(config.day_switch_time)
        if switch is None:
            return None

        current = self._calendar.business_date_of(now, switch)
        return CutoverDecision(
            cutover_instant=self._calendar.at_switch_time(current, switch),
            target_business_date=self._calendar.previous_business_date(current),
        )
