"""
Data models for the png_scout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class DoneReason(str, Enum):
    """Why a crawl stopped."""

    TARGET_REACHED = "target_reached"
    FRONTIER_EXHAUSTED = "frontier_exhausted"
    ABORTED = "aborted"


@dataclass(slots=True)
class FetchResult:
    """Response of a single fetch: effective URL, status, MIME header and raw body."""

    url: str
    status: int
    content_type: str
    body: bytes


@dataclass(slots=True)
class CrawlResult:
    """Outcome of a whole crawl."""

    png_urls: List[str]
    reason: DoneReason
    visited: List[str] = field(default_factory=list)
    pages_crawled: int = 0
    elapsed: float = 0.0
