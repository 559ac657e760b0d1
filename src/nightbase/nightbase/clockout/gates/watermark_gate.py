from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ...stores.model import StoreCutoverConfig
from ..model import CutoverDecision
from ..resolver import CutoverResolver
from ..watermark_repository import WatermarkRepository
from .base import CutoverGate

logger = logging.getLogger(__name__)


class WatermarkGate(CutoverGate):
    """Catch-up gate keyed on the last business date closed per store.

    Any run after a store's cutover closes the business day that just ended,
    unless the watermark says it was already done. Only the latest ended day
    is considered; older gaps are not backfilled.
    """

    def __init__(self, resolver: CutoverResolver, watermarks: WatermarkRepository):
        self._resolver = resolver
        self._watermarks = watermarks

    def decide(self, config: StoreCutoverConfig, now: datetime) -> Optional[CutoverDecision]:
        decision = self._resolver.latest_ended(config, now)
        if decision is None:
            return None

        last = self._watermarks.get_last_work_date(config.store_id)
        if last is not None and last >= decision.target_business_date:
            return None
        return decision

    def mark_processed(self, config: StoreCutoverConfig, decision: CutoverDecision) -> None:
        self._watermarks.set_last_work_date(config.store_id, decision.target_business_date)
        logger.debug("Store %s watermark -> %s", config.store_id, decision.target_business_date)
