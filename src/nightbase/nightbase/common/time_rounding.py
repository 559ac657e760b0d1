from __future__ import annotations

from datetime import datetime, timedelta

import pytz

from ..core.enums import RoundingMethod

_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=pytz.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)


def round_time(timestamp: datetime, method: RoundingMethod | str, minutes: int) -> datetime:
    """Snap ``timestamp`` to a multiple of ``minutes`` on epoch milliseconds.

    ``floor`` and ``ceil`` do what they say; anything else rounds to the nearest
    bucket with halves going up. Aware input keeps its timezone, naive input
    stays naive. ``minutes`` must be positive; that is the caller's job.
    """

    bucket = int(minutes) * 60_000
    epoch = _EPOCH_NAIVE if timestamp.tzinfo is None else _EPOCH_UTC
    millis = (timestamp - epoch) // _ONE_MS

    if method == RoundingMethod.FLOOR:
        buckets = millis // bucket
    elif method == RoundingMethod.CEIL:
        buckets = -(-millis // bucket)
    else:
        buckets = (2 * millis + bucket) // (2 * bucket)

    rounded = epoch + timedelta(milliseconds=buckets * bucket)
    if timestamp.tzinfo is None:
        return rounded
    return rounded.astimezone(timestamp.tzinfo)
