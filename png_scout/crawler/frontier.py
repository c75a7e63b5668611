"""
URL bookkeeping for the crawler: the deduplication set and the LIFO frontier.
"""
from __future__ import annotations

import asyncio
from typing import List, Literal, Optional, Set

from png_scout.crawler.errors import CapacityExceeded
from png_scout.crawler.models import DoneReason
from png_scout.crawler.termination import TerminationSignal
from png_scout.logger import get_logger

__all__ = ("OverflowPolicy", "VisitedSet", "Frontier")

OverflowPolicy = Literal["error", "drop"]

logger = get_logger("frontier")


class VisitedSet:
    """Every URL the crawl has ever scheduled.

    :meth:`try_claim` is the single point that decides which worker gets to
    enqueue a URL.  It contains no suspension point, so on one event loop it
    is atomic with respect to every other task.
    """

    def __init__(self, capacity: Optional[int] = None, overflow: OverflowPolicy = "error") -> None:
        self.capacity = capacity
        self.overflow = overflow
        self._urls: Set[str] = set()

    def try_claim(self, url: str) -> bool:
        """Insert *url* if absent.  True means the caller now owns enqueuing it."""
        if url in self._urls:
            return False
        if self.capacity is not None and len(self._urls) >= self.capacity:
            if self.overflow == "error":
                raise CapacityExceeded("visited set", self.capacity)
            logger.debug("Visited set full, dropping %s", url)
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


class Frontier:
    """LIFO stack of claimed-but-unprocessed URLs.

    The stack, the optional visited log and the idle-worker counter of the
    :class:`TerminationSignal` are all guarded by ``self._lock``, so popping a
    URL and leaving the idle pool happen as one step, as do returning to the
    idle pool and checking for exhaustion.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        overflow: OverflowPolicy = "error",
        record_visits: bool = False,
    ) -> None:
        self.capacity = capacity
        self.overflow = overflow
        self._stack: List[str] = []
        self._visited_log: Optional[List[str]] = [] if record_visits else None
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def visited(self) -> List[str]:
        """URLs popped so far, in pop order (empty unless visits are recorded)."""
        return list(self._visited_log or ())

    async def push(self, url: str, signal: TerminationSignal) -> bool:
        """Add a claimed URL and announce it.  Returns False if it was dropped."""
        async with self._lock:
            if self.capacity is not None and len(self._stack) >= self.capacity:
                if self.overflow == "error":
                    raise CapacityExceeded("frontier", self.capacity)
                logger.debug("Frontier full, dropping %s", url)
                return False
            self._stack.append(url)
        signal.post()
        return True

    async def pop_or_wait(self, signal: TerminationSignal) -> Optional[str]:
        """Block until a URL is available and return it, or None once the crawl is done."""
        if not await signal.wait_for_work():
            return None
        async with self._lock:
            # done may have been declared while waiting for the lock
            if signal.done:
                signal.available.release()
                return None
            signal.idle -= 1
            url = self._stack.pop()
            if self._visited_log is not None:
                self._visited_log.append(url)
        return url

    async def settle(self, signal: TerminationSignal) -> None:
        """Return the caller to the idle pool after a crawl step.

        If that makes every worker idle while the stack is empty, nothing can
        produce more work and the crawl is declared exhausted.
        """
        async with self._lock:
            signal.idle += 1
            if signal.idle == signal.workers and not self._stack:
                signal.declare_done(DoneReason.FRONTIER_EXHAUSTED)
