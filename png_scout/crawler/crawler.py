# === FILE: png_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout
from png_scout.config import CrawlerConfig
from png_scout.crawler.fetcher import Fetcher, PageFetcher
from png_scout.crawler.frontier import Frontier, VisitedSet
from png_scout.crawler.models import CrawlResult, DoneReason
from png_scout.crawler.results import ResultCollector
from png_scout.crawler.termination import TerminationSignal
from png_scout.crawler.worker import Worker
from png_scout.logger import logger

__all__ = ("PngCrawler",)


class PngCrawler:
    """Multi-worker crawler that collects URLs serving PNG images.

    Owns the frontier, the visited set, the result collector and the
    termination signal, and hands them to ``config.workers`` workers.
    A fetcher can be injected; otherwise an aiohttp session is opened on
    entering the context.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.logger = logger
        self.visited = VisitedSet(config.capacity, config.overflow)
        self.frontier = Frontier(
            config.capacity, config.overflow, record_visits=config.visited_log is not None
        )
        self.results = ResultCollector(config.max_pngs)
        self.signal = TerminationSignal(config.workers)
        self.workers: List[Worker] = []

    async def __aenter__(self) -> PngCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        if self.workers:
            raise RuntimeError("PngCrawler instances crawl only once")
        self.logger.info(
            "Crawl start: %s (workers=%d, target=%d PNGs)",
            self.config.seed_url, self.config.workers, self.config.max_pngs,
        )
        start = time.monotonic()

        self.visited.try_claim(self.config.seed_url)
        await self.frontier.push(self.config.seed_url, self.signal)

        self.workers = [
            Worker(i, self.fetcher, self.frontier, self.visited, self.results, self.signal)
            for i in range(self.config.workers)
        ]
        tasks = [asyncio.create_task(w.run(), name=f"png-worker-{w.worker_id}") for w in self.workers]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        duration = time.monotonic() - start
        pages = sum(w.pages_crawled for w in self.workers)
        self.logger.info(
            "Finished (%s): %d PNG(s), %d pages in %.2f s",
            self.signal.reason.value if self.signal.reason else "-",
            len(self.results), pages, duration,
        )
        return CrawlResult(
            png_urls=self.results.urls,
            reason=self.signal.reason or DoneReason.FRONTIER_EXHAUSTED,
            visited=self.frontier.visited,
            pages_crawled=pages,
            elapsed=duration,
        )
