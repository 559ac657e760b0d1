from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def query_open(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, work_date, clock_in, clock_out, scheduled_end_time, forgot_clockout
                FROM time_cards
                WHERE work_date=%s AND clock_out IS NULL
                """,
                (work_date,),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    time_card_id=str(r["id"]),
                    user_id=str(r["user_id"]),
                    work_date=r["work_date"],
                    clock_in=from_db_datetime(r["clock_in"]),
                    clock_out=from_db_datetime(r.get("clock_out")),
                    scheduled_end_time=from_db_datetime(r.get("scheduled_end_time")),
                    forgot_clockout=bool(r.get("forgot_clockout")),
                )
                for r in rows
            ]

    def close(
        self,
        *,
        time_card_id: str,
        clock_out: datetime,
        scheduled_end_time: Optional[datetime],
        forgot_clockout: bool = True,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Guard on clock_out so an overlapping run cannot overwrite a closed card.
            cur.execute(
                """
                UPDATE time_cards
                SET clock_out=%s, scheduled_end_time=%s, forgot_clockout=%s
                WHERE id=%s AND clock_out IS NULL
                """,
                (to_db_datetime(clock_out), to_db_datetime(scheduled_end_time), int(forgot_clockout), time_card_id),
            )
            return cur.rowcount > 0
