"""
Distributed termination detection shared by all crawl workers.

There is no scheduler task: every worker blocks on a counting semaphore that
is released once per URL pushed into the frontier.  The crawl ends when either

* a worker fills the result collector (``TARGET_REACHED``), or
* a worker finishing its step sees every worker idle and the frontier empty
  (``FRONTIER_EXHAUSTED``).

Declaring completion sets :attr:`TerminationSignal.done` and releases the
semaphore once.  Only one parked worker wakes from that release, so each
worker that wakes and finds ``done`` set releases the semaphore once more
before exiting.  The wake-up travels down the chain of parked workers until
all of them have left.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from png_scout.crawler.models import DoneReason
from png_scout.logger import get_logger

__all__ = ("TerminationSignal",)

logger = get_logger("termination")


class TerminationSignal:
    """Done flag, work-availability semaphore and idle-worker counter."""

    def __init__(self, workers: int) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.workers = workers
        self.available = asyncio.Semaphore(0)
        # Workers between "finished a step" and "popped the next URL".
        # Only touched while holding the frontier lock.
        self.idle = workers
        self._done = False
        self._reason: Optional[DoneReason] = None

    @property
    def done(self) -> bool:
        return self._done

    @property
    def reason(self) -> Optional[DoneReason]:
        return self._reason

    def post(self) -> None:
        """Announce one more unit of work."""
        self.available.release()

    def declare_done(self, reason: DoneReason) -> None:
        """Mark the crawl complete and wake one parked worker.

        Repeated calls keep the first reason but still release the
        semaphore; an extra release is absorbed by the done check.
        """
        if not self._done:
            self._done = True
            self._reason = reason
            logger.info("Crawl complete: %s", reason.value)
        self.available.release()

    def abort(self) -> None:
        self.declare_done(DoneReason.ABORTED)

    async def wait_for_work(self) -> bool:
        """Park until work is announced or the crawl is declared done.

        Returns False once the crawl is done.  In that case the consumed
        release is handed on to the next parked worker.
        """
        await self.available.acquire()
        if self._done:
            self.available.release()
            return False
        return True
