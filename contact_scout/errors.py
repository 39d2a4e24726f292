# File: contact_scout/errors.py
"""contact_scout.errors: Иерархия исключений краулера.

Ошибки запроса (``InvalidURL``, ``NoValidTargets``, ``InvalidRequest``)
прерывают весь запуск ещё до начала обхода. Ошибки страниц (``PageError`` и
наследники) поднимает Fetcher, а краулер превращает их в ``PageRecord``.
"""

from __future__ import annotations

from typing import Union

__all__ = (
    "ContactScoutError",
    "InvalidURL",
    "NoValidTargets",
    "InvalidRequest",
    "PageError",
    "PageFetchError",
    "PageHTTPError",
    "PageSkipped",
)


class ContactScoutError(Exception):
    """Базовое исключение проекта."""


class InvalidURL(ContactScoutError, ValueError):
    """URL нельзя разобрать как абсолютный (или он не http/https)."""

    def __init__(self, raw: object, reason: str = "not an absolute http(s) URL") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid URL {raw!r}: {reason}")


class NoValidTargets(ContactScoutError):
    """После проверки и дедупликации не осталось ни одного URL."""

    def __init__(self) -> None:
        super().__init__("No valid target URLs to crawl")


class InvalidRequest(ContactScoutError, ValueError):
    """Некорректные параметры запроса (например, creditsToUse)."""


class PageError(ContactScoutError):
    """Ошибка загрузки одной страницы; не прерывает обход."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"{url}: {message}")


class PageFetchError(PageError):
    """Сетевая ошибка или таймаут."""

    status = "network_error"


class PageHTTPError(PageError):
    """Ответ с кодом вне диапазона 2xx."""

    def __init__(self, url: str, status: int) -> None:
        self.status: Union[int, str] = status
        super().__init__(url, f"HTTP {status}")


class PageSkipped(PageError):
    """Ответ не является HTML-документом."""

    def __init__(self, url: str, status: int, content_type: str) -> None:
        self.status: Union[int, str] = status
        self.content_type = content_type or "unknown"
        super().__init__(url, f"skipped content type {self.content_type}")
