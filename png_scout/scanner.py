# === FILE: png_scout/scanner.py ===
"""
Wrapper module for launching a crawl.
"""
from png_scout.config import CrawlerConfig
from png_scout.crawler.crawler import PngCrawler
from png_scout.crawler.models import CrawlResult


async def start_crawl(cfg: CrawlerConfig) -> CrawlResult:
    """
    Run the PNG crawler inside its context and return the crawl result.

    Parameters
    ----------
    cfg : CrawlerConfig
        Crawl configuration.

    Returns
    -------
    CrawlResult
        PNG URLs found, visited URLs (if logged) and the stop reason.
    """
    async with PngCrawler(cfg) as crawler:
        return await crawler.crawl()

__all__ = ["start_crawl"]
