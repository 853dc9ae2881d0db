from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Default wall-clock implementation.

    Card timestamps are local wall-clock time without an offset, which is
    what the mobile client renders directly.
    """

    def now(self) -> datetime:
        return datetime.now()
