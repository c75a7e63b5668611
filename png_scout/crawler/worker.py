"""
A single crawl worker.

Each worker repeatedly:
  1. pops a URL from the frontier (parking until one is announced),
  2. fetches it and records it if the body is a PNG,
  3. claims and pushes every new link of an HTML page,
  4. returns to the idle pool, detecting frontier exhaustion,
until the crawl is declared done.
"""
from __future__ import annotations

from enum import Enum
from typing import List

from png_scout.crawler.classifier import is_html, is_png
from png_scout.crawler.errors import FetchError, LinkExtractionError
from png_scout.crawler.fetcher import PageFetcher
from png_scout.crawler.frontier import Frontier, VisitedSet
from png_scout.crawler.link_extractor import extract_links
from png_scout.crawler.models import DoneReason
from png_scout.crawler.results import ResultCollector
from png_scout.crawler.termination import TerminationSignal
from png_scout.logger import get_logger

__all__ = ("WorkerState", "Worker")


class WorkerState(str, Enum):
    AWAITING_WORK = "awaiting_work"
    CRAWLING = "crawling"
    DISCOVERING = "discovering"
    EXITED = "exited"


class Worker:
    """Crawl loop run as one asyncio task; shares all state with its peers."""

    def __init__(
        self,
        worker_id: int,
        fetcher: PageFetcher,
        frontier: Frontier,
        visited: VisitedSet,
        results: ResultCollector,
        signal: TerminationSignal,
    ) -> None:
        self.worker_id = worker_id
        self.fetcher = fetcher
        self.frontier = frontier
        self.visited = visited
        self.results = results
        self.signal = signal
        self.state = WorkerState.AWAITING_WORK
        self.pages_crawled = 0
        self.logger = get_logger(f"worker.{worker_id}")

    async def run(self) -> None:
        try:
            while True:
                self.state = WorkerState.AWAITING_WORK
                url = await self.frontier.pop_or_wait(self.signal)
                if url is None:
                    break
                self.state = WorkerState.CRAWLING
                links = await self._crawl(url)
                self.state = WorkerState.DISCOVERING
                await self._discover(links)
                await self.frontier.settle(self.signal)
        except Exception:
            # peers would otherwise stay parked forever
            self.signal.abort()
            raise
        finally:
            self.state = WorkerState.EXITED
        self.logger.debug("Worker %d exiting after %d pages", self.worker_id, self.pages_crawled)

    async def _crawl(self, url: str) -> List[str]:
        """Fetch *url*, record it if it is a PNG, and return its outgoing links."""
        self.pages_crawled += 1
        try:
            page = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.logger.warning("Failed %s", exc)
            return []
        self.logger.debug("Fetched %s [%d %s]", url, page.status, page.content_type or "-")

        if is_png(page.body):
            if await self.results.try_record(url):
                self.logger.info("PNG %d/%d: %s", len(self.results), self.results.limit, url)
            if self.results.sealed:
                self.signal.declare_done(DoneReason.TARGET_REACHED)

        if page.status >= 400 or not is_html(page.content_type):
            return []
        try:
            return extract_links(page.body, page.url)
        except LinkExtractionError as exc:
            self.logger.warning("Unparseable HTML %s", exc)
            return []

    async def _discover(self, links: List[str]) -> None:
        for link in links:
            if self.visited.try_claim(link):
                await self.frontier.push(link, self.signal)
