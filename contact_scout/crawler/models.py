"""
Data models for the ContactScout crawler.

Records are plain dataclasses; ``to_dict()`` produces the camelCase shape
used in JSON reports.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from contact_scout.matcher.phrases import normalize_text

PageStatus = Union[int, str]
NETWORK_ERROR = "network_error"
UNAVAILABLE_TITLE = "Unavailable"
UNTITLED = "Untitled"


@dataclass(slots=True)
class FetchedPage:
    """Successful HTML response: requested URL, final URL and markup."""

    url: str
    final_url: str
    status: int
    content_type: str
    content: str


@dataclass(frozen=True, slots=True)
class PageRecord:
    """One dequeued URL and its outcome."""

    url: str
    status: PageStatus
    title: str

    def key(self) -> Tuple[str, PageStatus, str]:
        return (self.url, self.status, self.title)

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "status": self.status, "title": self.title}


@dataclass(frozen=True, slots=True)
class Candidate:
    """Interactive element found on a page (link, button or input)."""

    element: str
    text: str
    href: str
    source_url: str


@dataclass(frozen=True, slots=True)
class Match:
    """Candidate whose text or href contains a contact phrase."""

    page_url: str
    page_title: str
    element: str
    text: str
    href: str
    matched_phrases: Tuple[str, ...]

    def key(self) -> Tuple[str, str, str, str]:
        """Dedup key: page, element kind, normalized text, resolved href."""
        return (self.page_url, self.element, normalize_text(self.text), self.href)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageUrl": self.page_url,
            "pageTitle": self.page_title,
            "element": self.element,
            "text": self.text,
            "href": self.href,
            "matchedPhrases": list(self.matched_phrases),
        }


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Outcome of a single job (one start URL)."""

    start_url: str
    pages_visited: int
    max_pages: int
    pages: Tuple[PageRecord, ...] = field(default_factory=tuple)
    matches: Tuple[Match, ...] = field(default_factory=tuple)

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startUrl": self.start_url,
            "pagesVisited": self.pages_visited,
            "maxPages": self.max_pages,
            "pages": [p.to_dict() for p in self.pages],
            "totalMatches": self.total_matches,
            "matches": [m.to_dict() for m in self.matches],
        }


@dataclass(frozen=True, slots=True)
class MergedResult:
    """Pages and matches unioned across jobs, first-seen order."""

    pages: List[PageRecord]
    matches: List[Match]
