import asyncio
import math
import threading
import time
from datetime import timedelta

from btcexplorer.application import settings
from btcexplorer.application.logging_factory import Logger


def _to_seconds(value) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


class RateLimitAvoider:
    """
    Gate enforcing a minimum interval between permitted calls.

    The interval is the configured duration per call plus a fixed margin.
    The time of the last permitted call is the only state; it's read and
    written under a threading lock which is never held while waiting, so
    coroutines and threads may share the same instance.
    """
    def __init__(self, duration_per_call, margin=settings.RATE_LIMIT_MARGIN, clock=time.monotonic):
        self.duration_per_call = _to_seconds(duration_per_call)
        self.margin = _to_seconds(margin)
        if not (math.isfinite(self.duration_per_call) and math.isfinite(self.margin)) \
                or self.duration_per_call < 0 or self.margin < 0:
            raise ValueError('duration_per_call and margin must be finite and not negative')
        self._clock = clock
        self._lock = threading.Lock()
        self._last_call_at = None

    @property
    def interval(self) -> float:
        return self.duration_per_call + self.margin

    @property
    def last_call_at(self):
        return self._last_call_at

    def _try_acquire(self) -> float:
        """
        returns 0 if the call is permitted, the seconds to wait otherwise.
        """
        with self._lock:
            now = self._clock()
            if self._last_call_at is not None:
                wait = self._last_call_at + self.interval - now
                if wait > 0:
                    return wait
            self._last_call_at = now
            return 0

    async def acquire(self):
        wait = self._try_acquire()
        while wait:
            Logger.ratelimit.debug('rate limit reached, waiting %.3fs', wait)
            await asyncio.sleep(wait)
            wait = self._try_acquire()

    def acquire_blocking(self):
        wait = self._try_acquire()
        while wait:
            Logger.ratelimit.debug('rate limit reached, blocking for %.3fs', wait)
            time.sleep(wait)
            wait = self._try_acquire()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False
