"""
Bounded collector of PNG URLs.
"""
from __future__ import annotations

import asyncio
from typing import List

__all__ = ("ResultCollector",)


class ResultCollector:
    """Append-only list of PNG URLs that seals itself at ``limit`` entries."""

    def __init__(self, limit: int) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._urls: List[str] = []
        self._lock = asyncio.Lock()

    async def try_record(self, url: str) -> bool:
        """Append *url* unless the collector is already sealed."""
        async with self._lock:
            if len(self._urls) >= self.limit:
                return False
            self._urls.append(url)
            return True

    @property
    def sealed(self) -> bool:
        return len(self._urls) >= self.limit

    @property
    def urls(self) -> List[str]:
        return list(self._urls)

    def __len__(self) -> int:
        return len(self._urls)
