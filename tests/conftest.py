from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest
import pytz

from src.nightbase.nightbase.attendance.model import AttendanceRecord
from src.nightbase.nightbase.clockout.resolver import CutoverResolver
from src.nightbase.nightbase.common.business_calendar import BusinessCalendar
from src.nightbase.nightbase.stores.model import StoreCutoverConfig

JST = pytz.timezone("Asia/Tokyo")


class InMemoryStores:
    def __init__(self, stores: list[StoreCutoverConfig] | None = None, roster: dict[str, list[str]] | None = None):
        self.stores = list(stores or [])
        self.roster = dict(roster or {})
        self.load_error: Optional[Exception] = None
        self.roster_errors: dict[str, Exception] = {}

    def list_auto_clockout_stores(self):
        if self.load_error:
            raise self.load_error
        return [s for s in self.stores if s.auto_clockout_enabled]

    def list_staff_ids(self, store_id: str):
        if store_id in self.roster_errors:
            raise self.roster_errors[store_id]
        return list(self.roster.get(store_id, []))


class InMemoryAttendance:
    def __init__(self):
        self.cards: dict[str, AttendanceRecord] = {}
        self.failing_ids: set[str] = set()
        self.query_calls: list[date] = []

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self.cards[record.time_card_id] = record
        return record

    def query_open(self, work_date: date):
        self.query_calls.append(work_date)
        return [r for r in self.cards.values() if r.work_date == work_date and r.clock_out is None]

    def close(self, *, time_card_id: str, clock_out: datetime, scheduled_end_time, forgot_clockout: bool = True) -> bool:
        if time_card_id in self.failing_ids:
            raise RuntimeError("connection lost")

        card = self.cards.get(time_card_id)
        if card is None or card.clock_out is not None:
            return False
        self.cards[time_card_id] = replace(
            card,
            clock_out=clock_out,
            scheduled_end_time=scheduled_end_time,
            forgot_clockout=forgot_clockout,
        )
        return True


class InMemoryWatermarks:
    def __init__(self, initial: dict[str, date] | None = None):
        self.last: dict[str, date] = dict(initial or {})

    def get_last_work_date(self, store_id: str) -> Optional[date]:
        return self.last.get(store_id)

    def set_last_work_date(self, store_id: str, work_date: date) -> None:
        self.last[store_id] = work_date


@pytest.fixture
def jst():
    def _jst(*args) -> datetime:
        return JST.localize(datetime(*args))

    return _jst


@pytest.fixture
def fixed_now(jst):
    return jst(2024, 6, 10, 5, 0, 0)


@pytest.fixture
def calendar():
    return BusinessCalendar("Asia/Tokyo")


@pytest.fixture
def resolver(calendar):
    return CutoverResolver(calendar)


@pytest.fixture
def stores_repo():
    return InMemoryStores()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def watermarks_repo():
    return InMemoryWatermarks()


@pytest.fixture
def make_card(jst):
    def _make(time_card_id: str, user_id: str, work_date: date, clock_in: datetime | None = None) -> AttendanceRecord:
        return AttendanceRecord(
            time_card_id=time_card_id,
            user_id=user_id,
            work_date=work_date,
            clock_in=clock_in or jst(work_date.year, work_date.month, work_date.day, 20, 0),
        )

    return _make
