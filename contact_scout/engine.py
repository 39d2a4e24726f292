# File: contact_scout/engine.py
"""contact_scout.engine: Оркестрация нескольких заданий обхода и агрегация результатов."""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, List, Optional, Sequence

from contact_scout.aggregator import CrawlReport, build_report
from contact_scout.config import CrawlerConfig, clamp_max_pages, load_config
from contact_scout.crawler.crawler import ContactCrawler
from contact_scout.crawler.models import CrawlResult
from contact_scout.errors import InvalidRequest, InvalidURL, NoValidTargets
from contact_scout.logger import logger
from contact_scout.utils import canonicalize_url, is_http_url, remove_duplicates

__all__ = ["Engine", "run_crawl", "resolve_targets", "validate_credits"]


def resolve_targets(target_url: Optional[str], target_urls: Optional[Iterable[str]] = None) -> List[str]:
    """Проверяет, канонизирует и дедуплицирует цели, сохраняя порядок.

    Пустые строки пропускаются; любая другая строка, не являющаяся абсолютным
    http(s) URL, прерывает весь запрос с InvalidURL.
    """
    raw_targets: List[Any] = [target_url, *(target_urls or [])]
    canonical: List[str] = []
    for raw in raw_targets:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        if not is_http_url(raw):
            raise InvalidURL(raw)
        canonical.append(canonicalize_url(raw))
    targets = remove_duplicates(canonical)
    if not targets:
        raise NoValidTargets()
    return targets


def validate_credits(credits_to_use: Any) -> int:
    """creditsToUse должен быть положительным целым числом."""
    if isinstance(credits_to_use, bool) or not isinstance(credits_to_use, int) or credits_to_use <= 0:
        raise InvalidRequest("creditsToUse must be a positive integer")
    return credits_to_use


async def run_crawl(
    target_url: Optional[str],
    target_urls: Optional[Sequence[str]] = None,
    max_pages: Optional[int] = None,
    credits_to_use: int = 1,
    *,
    config: Optional[CrawlerConfig] = None,
) -> CrawlReport:
    """Единая точка входа: обходит каждую цель по очереди и сливает результаты.

    Списание кредитов выполняет вызывающая сторона до вызова; здесь значение
    только проверяется и попадает в отчёт.
    """
    cfg = config or CrawlerConfig()
    credits = validate_credits(credits_to_use)
    targets = resolve_targets(target_url, target_urls)
    budget = clamp_max_pages(cfg.max_pages if max_pages is None else max_pages)

    logger.info("Starting crawl of %d target(s), %d page(s) each", len(targets), budget)
    results: List[CrawlResult] = []
    async with ContactCrawler(cfg) as crawler:
        for target in targets:
            results.append(await crawler.crawl(target, budget))

    report = build_report(targets, results, budget, credits_used=credits)
    logger.info(
        "Crawl finished: %d page(s) visited, %d match(es)",
        report.pages_visited,
        report.total_matches,
    )
    return report


class Engine:
    """Фасад для CLI и тестов: загрузка конфига, запуск обхода и агрегация результатов."""

    @staticmethod
    def load_config(path: Optional[str]) -> CrawlerConfig:
        """Загружает конфиг из YAML/JSON или использует значения по умолчанию."""
        return load_config(path)

    def __init__(self, config: Optional[CrawlerConfig] = None) -> None:
        """Инициализирует Engine с заданной конфигурацией краулера."""
        self.config = config or CrawlerConfig()

    def run(
        self,
        target_url: Optional[str],
        target_urls: Optional[Sequence[str]] = None,
        max_pages: Optional[int] = None,
        credits_to_use: int = 1,
    ) -> CrawlReport:
        """Синхронно запускает run_crawl и возвращает отчёт."""
        try:
            return asyncio.run(
                run_crawl(target_url, target_urls, max_pages, credits_to_use, config=self.config)
            )
        except (InvalidURL, NoValidTargets, InvalidRequest) as exc:
            logger.error("Crawl request rejected: %s", exc)
            raise
