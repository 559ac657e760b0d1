from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...stores.model import StoreCutoverConfig
from ..model import CutoverDecision
from ..resolver import CutoverResolver
from .base import CutoverGate


class HourMatchGate(CutoverGate):
    """Process a store only in the hour matching its switch time.

    A trigger that misses that hour leaves the shifts open until the next day.
    """

    def __init__(self, resolver: CutoverResolver):
        self._resolver = resolver

    def decide(self, config: StoreCutoverConfig, now: datetime) -> Optional[CutoverDecision]:
        return self._resolver.resolve(config, now)
