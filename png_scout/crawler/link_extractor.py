# png_scout/crawler/link_extractor.py
"""
Link extraction for png_scout: every ``<a href>`` of a document, made absolute.
"""
from __future__ import annotations

from typing import List, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag
from png_scout.crawler.errors import LinkExtractionError


def extract_links(content: Union[str, bytes], base_url: str) -> List[str]:
    """
    Return the hrefs of all anchors in *content*, resolved against *base_url*.

    Only absolute results whose scheme starts with ``http`` are kept;
    document order is preserved and duplicates are left to the caller.
    """
    try:
        soup = BeautifulSoup(content, "html.parser")
    except ParserRejectedMarkup as exc:
        raise LinkExtractionError(f"{base_url}: {exc}") from exc

    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        absolute = urljoin(base_url, href_val.strip())
        if absolute.startswith("http"):
            links.append(absolute)
    return links
