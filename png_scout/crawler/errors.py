"""
Exceptions raised by the png_scout crawler.
"""
from __future__ import annotations


class PngScoutError(Exception):
    """Base class for every error raised by png_scout."""


class FetchError(PngScoutError):
    """A URL could not be fetched (transport error, timeout, too many redirects)."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class LinkExtractionError(PngScoutError):
    """The HTML parser rejected a document."""


class CapacityExceeded(PngScoutError):
    """More distinct URLs were discovered than the configured capacity allows."""

    def __init__(self, structure: str, capacity: int) -> None:
        super().__init__(f"{structure} capacity of {capacity} URLs exceeded")
        self.structure = structure
        self.capacity = capacity
