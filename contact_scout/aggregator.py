# File: contact_scout/aggregator.py
"""contact_scout.aggregator: Слияние результатов нескольких заданий в общий отчёт."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

from contact_scout.crawler.models import CrawlResult, Match, MergedResult, PageRecord
from contact_scout.logger import logger


@dataclass(slots=True)
class CrawlReport:
    """Итоговый отчёт по всем целям одного запроса."""

    start_url: str
    target_urls: List[str]
    pages_visited: int
    max_pages_per_target: int
    pages: List[PageRecord] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    per_target_results: List[CrawlResult] = field(default_factory=list)
    credits_used: int = 1

    @property
    def total_matches(self) -> int:
        return len(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Словарь в формате ответа API (camelCase)."""
        return {
            "startUrl": self.start_url,
            "targetUrls": list(self.target_urls),
            "pagesVisited": self.pages_visited,
            "maxPagesPerTarget": self.max_pages_per_target,
            "pages": [p.to_dict() for p in self.pages],
            "totalMatches": self.total_matches,
            "matches": [m.to_dict() for m in self.matches],
            "perTargetResults": [r.to_dict() for r in self.per_target_results],
            "creditsUsed": self.credits_used,
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _merge_pages(results: Iterable[CrawlResult]) -> List[PageRecord]:
    """Объединяет страницы по ключу (url, status, title), первая встреча побеждает."""
    seen: set = set()
    pages: List[PageRecord] = []
    for result in results:
        for page in result.pages:
            if page.key() in seen:
                continue
            seen.add(page.key())
            pages.append(page)
    return pages


def _merge_matches(results: Iterable[CrawlResult]) -> List[Match]:
    """Объединяет совпадения по ключу (страница, элемент, нормализованный текст, href)."""
    seen: set = set()
    matches: List[Match] = []
    for result in results:
        for match in result.matches:
            if match.key() in seen:
                continue
            seen.add(match.key())
            matches.append(match)
    return matches


def merge_results(results: Sequence[CrawlResult]) -> MergedResult:
    """Сливает результаты заданий в порядке их выполнения."""
    merged = MergedResult(pages=_merge_pages(results), matches=_merge_matches(results))
    dropped = sum(r.total_matches for r in results) - len(merged.matches)
    if dropped:
        logger.debug("Merge dropped %d duplicate matches", dropped)
    return merged


def build_report(
    target_urls: Sequence[str],
    results: Sequence[CrawlResult],
    max_pages: int,
    credits_used: int = 1,
) -> CrawlReport:
    """Собирает все части отчёта в CrawlReport."""
    merged = merge_results(results)
    return CrawlReport(
        start_url=target_urls[0] if target_urls else "",
        target_urls=list(target_urls),
        pages_visited=sum(r.pages_visited for r in results),
        max_pages_per_target=max_pages,
        pages=merged.pages,
        matches=merged.matches,
        per_target_results=list(results),
        credits_used=credits_used,
    )
