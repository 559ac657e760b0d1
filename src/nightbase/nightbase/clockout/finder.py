from __future__ import annotations

from datetime import date

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..stores.repository import StoreConfigRepository


class OpenShiftFinder:
    """Open time cards of one store for one business date.

    time_cards has no store column, so the query is unscoped and the result
    is narrowed to the store's staff roster in memory.
    """

    def __init__(self, stores: StoreConfigRepository, attendance: AttendanceRepository):
        self._stores = stores
        self._attendance = attendance

    def find_open_shifts(self, store_id: str, target_date: date) -> list[AttendanceRecord]:
        roster = set(self._stores.list_staff_ids(store_id))
        if not roster:
            return []

        return [r for r in self._attendance.query_open(target_date) if r.is_open and r.user_id in roster]
