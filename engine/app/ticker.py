from __future__ import annotations
from typing import Callable, Optional


class IntervalTicker:
    """
    Turns per-frame dt_ms into fixed-period ticks.

    The loop feeds elapsed time through advance(); every time a full period
    has accumulated the armed callback fires once. cancel() disarms it and
    drops any partial period, so nothing fires until the next arm().
    """

    def __init__(self, period_ms: int = 1000):
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self.period_ms = period_ms
        self._callback: Optional[Callable[[], None]] = None
        self._acc_ms = 0.0

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._acc_ms = 0.0

    def cancel(self) -> None:
        self._callback = None
        self._acc_ms = 0.0

    def advance(self, dt_ms: float) -> int:
        """Feed elapsed time; returns how many ticks fired."""
        if self._callback is None:
            return 0
        self._acc_ms += dt_ms
        fired = 0
        while self._acc_ms >= self.period_ms:
            callback = self._callback
            if callback is None:
                # a tick handler cancelled us
                break
            self._acc_ms -= self.period_ms
            callback()
            fired += 1
        return fired
