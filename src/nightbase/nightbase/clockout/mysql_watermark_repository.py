from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytz

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, to_db_datetime
from .watermark_repository import WatermarkRepository


class MySQLWatermarkRepository(WatermarkRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_last_work_date(self, store_id: str) -> Optional[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT last_work_date FROM auto_clockout_watermarks WHERE store_id=%s", (store_id,))
            r = fetchone(cur)
            return r["last_work_date"] if r else None

    def set_last_work_date(self, store_id: str, work_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            # GREATEST keeps the watermark monotonic if runs overlap.
            cur.execute(
                """
                INSERT INTO auto_clockout_watermarks(store_id, last_work_date, updated_at)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    last_work_date=GREATEST(last_work_date, VALUES(last_work_date)),
                    updated_at=VALUES(updated_at)
                """,
                (store_id, work_date, to_db_datetime(datetime.now(pytz.utc))),
            )
