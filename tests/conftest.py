# File: tests/conftest.py
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List

import pytest

from png_scout.config import CrawlerConfig
from png_scout.crawler.classifier import PNG_SIGNATURE
from png_scout.crawler.errors import FetchError
from png_scout.crawler.models import FetchResult

PNG_BODY = PNG_SIGNATURE + b"\x00\x00\x00\rIHDR"


class FakeFetcher:
    """In-memory web: known URLs return their page, unknown ones 404, failing ones raise."""

    def __init__(
        self,
        pages: Dict[str, FetchResult],
        failing: Iterable[str] = (),
        delay: float = 0.0,
    ) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.delay = delay
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        # always yield so that workers interleave
        await asyncio.sleep(self.delay)
        if url in self.failing:
            raise FetchError(url, "connection reset")
        page = self.pages.get(url)
        if page is None:
            return FetchResult(url, 404, "text/html", b"<html>Not Found</html>")
        return page


class Web:
    """Builder for fake link graphs."""

    def __init__(self) -> None:
        self.pages: Dict[str, FetchResult] = {}

    def html(self, url: str, links: Iterable[str] = ()) -> Web:
        anchors = "".join(f'<a href="{link}">{link}</a>' for link in links)
        body = f"<html><body>{anchors}</body></html>".encode()
        self.pages[url] = FetchResult(url, 200, "text/html; charset=utf-8", body)
        return self

    def png(self, url: str) -> Web:
        self.pages[url] = FetchResult(url, 200, "image/png", PNG_BODY)
        return self

    def hub(self, seed: str, leaves: int, png_every: int = 1) -> Web:
        """*seed* links to *leaves* pages; every png_every-th leaf is a PNG, the rest link back."""
        urls = [f"{seed}/item{i}" for i in range(leaves)]
        self.html(seed, urls)
        for i, url in enumerate(urls):
            if i % png_every == 0:
                self.png(url)
            else:
                self.html(url, [seed])
        return self

    def fetcher(self, **kwargs) -> FakeFetcher:
        return FakeFetcher(self.pages, **kwargs)


@pytest.fixture()
def web() -> Web:
    return Web()


@pytest.fixture()
def small_web(web) -> Web:
    """a -> {b, c}, b -> {d}, d is a PNG, c is a dead end."""
    return (
        web.html("http://a", ["http://b", "http://c"])
        .html("http://b", ["http://d"])
        .html("http://c")
        .png("http://d")
    )


@pytest.fixture()
def make_config():
    """Return a factory for CrawlerConfig with test-friendly defaults."""

    def _make(seed_url: str = "http://a", **kwargs) -> CrawlerConfig:
        return CrawlerConfig(seed_url=seed_url, **kwargs)

    return _make


@pytest.fixture()
def project_logger():
    """The project logger, restored to its unconfigured state afterwards."""
    log = logging.getLogger("PngScout")
    saved = (log.level, list(log.handlers), log.propagate)
    yield log
    for handler in log.handlers:
        if handler not in saved[1]:
            handler.close()
    log.setLevel(saved[0])
    log.handlers[:] = saved[1]
    log.propagate = saved[2]
