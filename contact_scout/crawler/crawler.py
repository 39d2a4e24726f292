# === FILE: contact_scout/crawler/crawler.py ===
from __future__ import annotations

import posixpath
import time
from typing import Dict, FrozenSet, List, Optional, Tuple
from urllib.parse import urlsplit

from aiohttp import ClientSession, ClientTimeout, DummyCookieJar

from contact_scout.config import CrawlerConfig
from contact_scout.crawler.fetcher import Fetcher
from contact_scout.crawler.frontier import CrawlFrontier
from contact_scout.crawler.models import (
    NETWORK_ERROR,
    UNAVAILABLE_TITLE,
    Candidate,
    CrawlResult,
    Match,
    PageRecord,
)
from contact_scout.errors import PageFetchError, PageHTTPError, PageSkipped
from contact_scout.logger import logger
from contact_scout.matcher.phrases import PhraseMatcher
from contact_scout.parser.markup_scanner import scan_markup
from contact_scout.utils import canonicalize_url, extract_host, try_canonicalize, try_urljoin

__all__ = ("ContactCrawler", "should_visit", "BLOCKED_EXTENSIONS")

BLOCKED_EXTENSIONS: FrozenSet[str] = frozenset(
    {".pdf", ".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp", ".zip", ".rar", ".mp4"}
)


def should_visit(start_url: str, url: str) -> bool:
    """Same-origin filter: http(s), identical host, no binary/media extension."""
    start = try_canonicalize(start_url)
    target = try_canonicalize(url)
    if start is None or target is None:
        return False
    parts = urlsplit(target)
    if parts.scheme not in ("http", "https"):
        return False
    if extract_host(target) != extract_host(start):
        return False
    ext = posixpath.splitext(parts.path)[1].lower()
    return ext not in BLOCKED_EXTENSIONS


class _Job:
    """State of one crawl: frontier, collected pages and match dedup keys."""

    def __init__(self, start_url: str, max_pages: int) -> None:
        self.start_url = start_url
        self.max_pages = max_pages
        self.frontier = CrawlFrontier()
        self.pages: List[PageRecord] = []
        self.matches: List[Match] = []
        self._match_keys: set[Tuple[str, str, str, str]] = set()

    def add_match(self, match: Match) -> bool:
        key = match.key()
        if key in self._match_keys:
            return False
        self._match_keys.add(key)
        self.matches.append(match)
        return True

    def result(self) -> CrawlResult:
        return CrawlResult(
            start_url=self.start_url,
            pages_visited=self.frontier.visited_count,
            max_pages=self.max_pages,
            pages=tuple(self.pages),
            matches=tuple(self.matches),
        )


class ContactCrawler:
    """Bounded same-origin crawler looking for contact affordances.

    Use as an async context manager; the HTTP session is shared by every
    :meth:`crawl` call made inside the context, while all per-job state is
    created anew for each call.
    """

    def __init__(self, config: Optional[CrawlerConfig] = None, matcher: Optional[PhraseMatcher] = None) -> None:
        self.config = config or CrawlerConfig()
        self.matcher = matcher or PhraseMatcher(self.config.phrase_table())
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None

    async def __aenter__(self) -> ContactCrawler:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers=self._headers(),
            cookie_jar=DummyCookieJar(),
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _headers(self) -> Dict[str, str]:
        return {"User-Agent": self.config.user_agent, "Accept": self.config.accept}

    async def crawl(self, start_url: str, max_pages: Optional[int] = None) -> CrawlResult:
        """Crawl from *start_url* until the frontier drains or *max_pages* URLs were visited."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        budget = self.config.max_pages if max_pages is None else max_pages
        job = _Job(canonicalize_url(start_url), budget)
        job.frontier.push(job.start_url, priority=True)

        logger.info("Crawl started: %s (budget %d pages)", job.start_url, budget)
        started = time.monotonic()
        while job.frontier and job.frontier.visited_count < budget:
            url = job.frontier.pop()
            if url is None:
                break
            await self._visit(job, url)

        result = job.result()
        logger.info(
            "Crawl finished: %s, %d pages, %d matches in %.2f s",
            job.start_url,
            result.pages_visited,
            result.total_matches,
            time.monotonic() - started,
        )
        return result

    async def _visit(self, job: _Job, url: str) -> None:
        assert self.fetcher is not None
        try:
            page = await self.fetcher.fetch(url)
        except PageFetchError as exc:
            logger.warning("Network error %s", exc)
            job.pages.append(PageRecord(url, NETWORK_ERROR, UNAVAILABLE_TITLE))
            return
        except PageHTTPError as exc:
            logger.warning("HTTP error %s", exc)
            job.pages.append(PageRecord(url, exc.status, UNAVAILABLE_TITLE))
            return
        except PageSkipped as exc:
            logger.debug("Skipped %s", exc)
            job.pages.append(PageRecord(url, exc.status, f"Skipped ({exc.content_type})"))
            return

        title, candidates = scan_markup(page.content, page.url)
        job.pages.append(PageRecord(url, page.status, title))
        base = page.final_url or url
        for candidate in candidates:
            self._process_candidate(job, candidate, title, base)

    def _process_candidate(self, job: _Job, candidate: Candidate, title: str, base: str) -> None:
        absolute = try_urljoin(base, candidate.href) if candidate.href else ""
        canonical = try_canonicalize(absolute) if absolute else None

        phrases = self.matcher.match_phrases(f"{candidate.text} {candidate.href}")
        if phrases:
            match = Match(
                page_url=candidate.source_url,
                page_title=title,
                element=candidate.element,
                text=candidate.text,
                href=canonical or absolute or candidate.href,
                matched_phrases=tuple(phrases),
            )
            if job.add_match(match):
                logger.debug("Match on %s: %r -> %s", match.page_url, match.text, match.href)

        if canonical is None or canonical in job.frontier.visited:
            return
        if not should_visit(job.start_url, canonical):
            return
        priority = self.matcher.is_priority_url(f"{candidate.text} {absolute}")
        job.frontier.push(canonical, priority=priority)
