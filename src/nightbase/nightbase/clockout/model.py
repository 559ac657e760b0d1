from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class CutoverDecision:
    """Which business day to close for a store, and at what instant."""

    cutover_instant: datetime
    target_business_date: date


@dataclass(frozen=True)
class ClosureResult:
    time_card_id: str
    user_id: str
    store_id: str
    work_date: date
    clock_out_time: datetime
    success: bool = True
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "timeCardId": self.time_card_id,
            "userId": self.user_id,
            "storeId": self.store_id,
            "workDate": self.work_date.strftime("%Y-%m-%d"),
            "clockOutTime": self.clock_out_time.isoformat(),
        }
        if not self.success:
            out["success"] = False
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class ClockoutReport:
    results: list[ClosureResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return len(self.results) - self.processed

    def to_dict(self) -> dict:
        return {"processed": self.processed, "results": [r.to_dict() for r in self.results]}
