from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_gate_mode
from ..core.enums import GateMode
from ..core.exceptions import ValidationError
from .gates.base import CutoverGate
from .gates.hour_gate import HourMatchGate
from .gates.watermark_gate import WatermarkGate
from .resolver import CutoverResolver
from .watermark_repository import WatermarkRepository


@dataclass
class CutoverGateFactory:
    """Factory Pattern: pick the cutover gate from the AUTO_CLOCKOUT_GATE setting."""

    def create(
        self,
        *,
        mode: GateMode | str,
        resolver: CutoverResolver,
        watermarks: Optional[WatermarkRepository] = None,
    ) -> CutoverGate:
        mode = require_gate_mode(mode)

        if mode == GateMode.HOUR:
            return HourMatchGate(resolver)

        if watermarks is None:
            raise ValidationError("Watermark gate needs a watermark repository")
        return WatermarkGate(resolver, watermarks)
