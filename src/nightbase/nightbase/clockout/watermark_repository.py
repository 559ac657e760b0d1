from __future__ import annotations

from datetime import date
from typing import Optional, Protocol


class WatermarkRepository(Protocol):
    """Last business date fully closed by the auto clock-out job, per store."""

    def get_last_work_date(self, store_id: str) -> Optional[date]:
        raise NotImplementedError

    def set_last_work_date(self, store_id: str, work_date: date) -> None:
        raise NotImplementedError
