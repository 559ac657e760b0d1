from __future__ import annotations

from typing import Sequence

from ..common.validators import rounding_method_or_default, rounding_minutes_or_default
from ..core.constants import DEFAULT_DAY_SWITCH_TIME
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import StoreCutoverConfig
from .repository import StoreConfigRepository


class MySQLStoreRepository(StoreConfigRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_auto_clockout_stores(self) -> Sequence[StoreCutoverConfig]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, day_switch_time, auto_clockout_enabled,
                       time_rounding_enabled, time_rounding_method, time_rounding_minutes
                FROM stores
                WHERE auto_clockout_enabled=1
                ORDER BY id
                """
            )
            rows = fetchall(cur)
            return [
                StoreCutoverConfig(
                    store_id=str(r["id"]),
                    day_switch_time=self._switch_time_str(r.get("day_switch_time")),
                    auto_clockout_enabled=bool(r["auto_clockout_enabled"]),
                    time_rounding_enabled=bool(r.get("time_rounding_enabled")),
                    time_rounding_method=rounding_method_or_default(r.get("time_rounding_method")),
                    time_rounding_minutes=rounding_minutes_or_default(r.get("time_rounding_minutes")),
                )
                for r in rows
            ]

    def list_staff_ids(self, store_id: str) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM profiles WHERE store_id=%s", (store_id,))
            return [str(r["id"]) for r in fetchall(cur)]

    @staticmethod
    def _switch_time_str(value) -> str:
        # A malformed string is passed through untouched; the resolver skips that store.
        if value is None:
            return DEFAULT_DAY_SWITCH_TIME
        try:
            return normalize_mysql_time(value).strftime("%H:%M:%S")
        except (TypeError, ValueError):
            return str(value)
