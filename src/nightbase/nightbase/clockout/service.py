from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import pytz

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import StoreLoadError
from ..stores.model import StoreCutoverConfig
from ..stores.repository import StoreConfigRepository
from .closer import BatchCloser
from .finder import OpenShiftFinder
from .gates.base import CutoverGate
from .model import ClockoutReport, ClosureResult

logger = logging.getLogger(__name__)


class AutoClockoutService:
    """One run of the auto clock-out job.

    Stores are handled one after another. A store that cannot be resolved or
    queried is logged and skipped; only failing to load the store list aborts
    the run.
    """

    def __init__(
        self,
        stores: StoreConfigRepository,
        attendance: AttendanceRepository,
        *,
        gate: CutoverGate,
        finder: Optional[OpenShiftFinder] = None,
        closer: Optional[BatchCloser] = None,
    ):
        self._stores = stores
        self._gate = gate
        self._finder = finder or OpenShiftFinder(stores, attendance)
        self._closer = closer or BatchCloser(attendance)

    def run(self, *, now: Optional[datetime] = None) -> ClockoutReport:
        now = now or datetime.now(pytz.utc)

        try:
            stores = list(self._stores.list_auto_clockout_stores())
        except Exception as e:
            raise StoreLoadError(f"Could not load stores: {e}") from e

        if not stores:
            logger.info("No stores with auto clock-out enabled")
            return ClockoutReport()

        results: list[ClosureResult] = []
        for store in stores:
            if store.auto_clockout_enabled:
                results.extend(self._process_store(store, now))

        report = ClockoutReport(results=results)
        logger.info("Auto clock-out processed %d time cards (%d failed)", report.processed, report.failed)
        return report

    def _process_store(self, store: StoreCutoverConfig, now: datetime) -> list[ClosureResult]:
        try:
            decision = self._gate.decide(store, now)
        except Exception:
            logger.exception("Store %s: could not resolve the business day to close", store.store_id)
            return []
        if decision is None:
            logger.debug("Store %s: nothing to close at %s", store.store_id, now.isoformat())
            return []

        try:
            records = self._finder.find_open_shifts(store.store_id, decision.target_business_date)
        except Exception:
            logger.exception("Store %s: could not load open time cards", store.store_id)
            return []

        logger.info(
            "Store %s: closing %d open time cards for %s",
            store.store_id,
            len(records),
            decision.target_business_date,
        )
        results = self._closer.close_all(records, decision, store)

        # A business day with failed cards stays pending for the next run.
        if all(r.success for r in results):
            try:
                self._gate.mark_processed(store, decision)
            except Exception:
                logger.exception("Store %s: could not record processed business date", store.store_id)
        return results
