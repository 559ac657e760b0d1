from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.time_rounding import round_time
from ..stores.model import StoreCutoverConfig
from .model import ClosureResult, CutoverDecision

logger = logging.getLogger(__name__)


class BatchCloser:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def close_all(
        self,
        records: Iterable[AttendanceRecord],
        decision: CutoverDecision,
        config: StoreCutoverConfig,
    ) -> list[ClosureResult]:
        """Close every record at the cutover instant, one update per record.

        ``clock_out`` always stores the unrounded cutover; rounding only fills
        ``scheduled_end_time``. A failed update is logged and reported as a
        failed result, and the loop moves on.
        """

        return [self._close_one(record, decision, config) for record in records]

    def _close_one(
        self,
        record: AttendanceRecord,
        decision: CutoverDecision,
        config: StoreCutoverConfig,
    ) -> ClosureResult:
        clock_out_time = decision.cutover_instant
        scheduled_end_time = None
        if config.time_rounding_enabled:
            scheduled_end_time = round_time(clock_out_time, config.time_rounding_method, config.time_rounding_minutes)

        result = ClosureResult(
            time_card_id=record.time_card_id,
            user_id=record.user_id,
            store_id=config.store_id,
            work_date=decision.target_business_date,
            clock_out_time=clock_out_time,
        )

        try:
            updated = self._attendance.close(
                time_card_id=record.time_card_id,
                clock_out=clock_out_time,
                scheduled_end_time=scheduled_end_time,
                forgot_clockout=True,
            )
        except Exception as e:
            logger.exception("Failed to close time card %s (store %s)", record.time_card_id, config.store_id)
            return self._failed(result, str(e) or e.__class__.__name__)

        if not updated:
            logger.error("Time card %s was not updated (already closed?)", record.time_card_id)
            return self._failed(result, "Time card was not updated")

        logger.info(
            "Closed time card %s for user %s at %s",
            record.time_card_id,
            record.user_id,
            clock_out_time.isoformat(),
        )
        return result

    @staticmethod
    def _failed(result: ClosureResult, error: str) -> ClosureResult:
        return replace(result, success=False, error=error)
