# png_scout/crawler/fetcher.py
"""
Fetcher module: downloads a URL with bounded redirects, optional retry/backoff and timeout.
"""
from __future__ import annotations

import asyncio
from typing import Protocol, Sequence

from aiohttp import ClientError, ClientSession
from png_scout.config import CrawlerConfig
from png_scout.crawler.errors import FetchError
from png_scout.crawler.models import FetchResult
from png_scout.logger import get_logger

__all__ = ("RETRY_STATUS", "PageFetcher", "Fetcher")

RETRY_STATUS: Sequence[int] = tuple(range(500, 600)) + (429,)

logger = get_logger("fetcher")


class PageFetcher(Protocol):
    """Anything the workers can fetch URLs through."""

    async def fetch(self, url: str) -> FetchResult: ...


class Fetcher:
    """Handles HTTP fetching with redirects, retries/backoff and timeout."""

    def __init__(
        self,
        session: ClientSession,
        config: CrawlerConfig,
        retry_status: Sequence[int] = RETRY_STATUS,
        backoff_base: float = 1.0,
    ) -> None:
        self.session = session
        self.config = config
        self._retry_status = retry_status
        self._backoff_base = backoff_base

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch the URL, following at most ``config.max_redirects`` redirects.

        With ``max_redirects=0`` a 3xx is returned as it is.  Any HTTP
        status is a normal result; 5xx/429 are retried up to
        ``config.retry_times`` times first.  Transport errors, timeouts and
        redirect loops raise :class:`FetchError`.
        """
        hops = self.config.max_redirects
        attempts = 0
        while True:
            try:
                # aiohttp fails once the hop count reaches max_redirects, and 0 means unlimited
                async with self.session.get(
                    url,
                    allow_redirects=hops > 0,
                    max_redirects=hops + 1,
                ) as resp:
                    retry = resp.status in self._retry_status and attempts < self.config.retry_times
                    if not retry:
                        body = await resp.read()
                        return FetchResult(
                            url=str(resp.url),
                            status=resp.status,
                            content_type=resp.headers.get("Content-Type", ""),
                            body=body,
                        )
            except asyncio.TimeoutError as exc:
                raise FetchError(url, "timeout") from exc
            except (ClientError, ValueError) as exc:
                # ValueError: yarl rejected a malformed link
                raise FetchError(url, exc) from exc

            attempts += 1
            # exponential backoff, cap at 60s
            backoff = min(self._backoff_base * 2**attempts, 60)
            logger.debug("Retry %d/%d for %s after %.2f s", attempts, self.config.retry_times, url, backoff)
            await asyncio.sleep(backoff)
