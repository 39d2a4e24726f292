"""
Per-job crawl frontier: two-tier work queue plus queued/visited sets.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Optional, Set

__all__ = ("CrawlFrontier",)


class CrawlFrontier:
    """Work queue of canonical URLs owned by exactly one crawl job.

    Priority entries live in their own deque and are always served first;
    a new priority entry goes to the front of that tier.  Normal entries are
    FIFO.  A URL is queued at most once per job and is marked visited at the
    moment it is popped.
    """

    def __init__(self) -> None:
        self._priority: Deque[str] = deque()
        self._normal: Deque[str] = deque()
        self.queued: Set[str] = set()
        self.visited: Set[str] = set()

    def __len__(self) -> int:
        return len(self._priority) + len(self._normal)

    def __bool__(self) -> bool:
        return bool(self._priority or self._normal)

    def __iter__(self) -> Iterator[str]:
        yield from self._priority
        yield from self._normal

    def push(self, url: str, priority: bool = False) -> bool:
        """Queue *url*; no-op (returns False) if it was already queued or visited."""
        if url in self.queued or url in self.visited:
            return False
        self.queued.add(url)
        if priority:
            self._priority.appendleft(url)
        else:
            self._normal.append(url)
        return True

    def pop(self) -> Optional[str]:
        """Return the next unvisited URL and mark it visited, or None if drained."""
        while self:
            url = self._priority.popleft() if self._priority else self._normal.popleft()
            if url in self.visited:
                continue
            self.visited.add(url)
            return url
        return None

    @property
    def visited_count(self) -> int:
        return len(self.visited)
