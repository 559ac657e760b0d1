from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...stores.model import StoreCutoverConfig
from ..model import CutoverDecision


class CutoverGate(ABC):
    """Strategy Pattern: decide whether this run should close a store's previous business day."""

    @abstractmethod
    def decide(self, config: StoreCutoverConfig, now: datetime) -> Optional[CutoverDecision]:
        raise NotImplementedError

    def mark_processed(self, config: StoreCutoverConfig, decision: CutoverDecision) -> None:
        """Called once every open card of ``decision`` was closed."""
