"""
png_scout.crawler: concurrent crawl coordinator and its collaborators.
"""
from png_scout.crawler.crawler import PngCrawler
from png_scout.crawler.models import CrawlResult, DoneReason, FetchResult

__all__ = ["PngCrawler", "CrawlResult", "DoneReason", "FetchResult"]
