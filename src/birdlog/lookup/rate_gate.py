"""Request pacing for the public knowledge-base APIs.

Each API family (Wikipedia, Wikidata, Commons) gets its own gate. A gate
grants at most one permit per ``interval`` seconds, measured from the last
permit it actually granted.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_INTERVAL = 0.5  # seconds between requests to one API family


class RateGate:
    """Single-timestamp rate limiter for cooperative asyncio tasks."""

    def __init__(
        self,
        interval: float = DEFAULT_REQUEST_INTERVAL,
        name: str = "",
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the gate.

        Args:
            interval: Minimum seconds between two granted permits
            name: API family name, used in log messages
            clock: Monotonic clock returning seconds
            sleep: Coroutine used to wait for a slot
        """
        if interval < 0:
            raise ValueError(f"Rate gate interval must not be negative: {interval}")
        self.interval = interval
        self.name = name
        self._clock = clock
        self._sleep = sleep
        self._last_permit: float | None = None

    @property
    def last_permit(self) -> float | None:
        """Clock time of the most recently granted permit."""
        return self._last_permit

    def _reserve_slot(self) -> float:
        """Claim the next free slot and return how long to wait for it.

        Runs without a suspension point, so concurrent tasks each observe the
        slot claimed by the task before them.
        """
        now = self._clock()
        if self._last_permit is None:
            slot = now
        else:
            slot = max(now, self._last_permit + self.interval)
        self._last_permit = slot
        return slot - now

    async def throttle(self) -> None:
        """Wait until a request to this API family may be issued."""
        delay = self._reserve_slot()
        if delay > 0:
            logger.debug("Rate gate %s delaying request by %.3fs", self.name or "-", delay)
            await self._sleep(delay)
