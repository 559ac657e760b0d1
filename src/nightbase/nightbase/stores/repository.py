from __future__ import annotations

from typing import Protocol, Sequence

from .model import StoreCutoverConfig


class StoreConfigRepository(Protocol):
    """Read access to store settings and the store/staff relationship.

    Note (DIP): the clock-out services depend on this interface only, never on MySQL directly.
    """

    def list_auto_clockout_stores(self) -> Sequence[StoreCutoverConfig]:
        """Stores with ``auto_clockout_enabled`` set."""

        raise NotImplementedError

    def list_staff_ids(self, store_id: str) -> Sequence[str]:
        raise NotImplementedError
