# File: contact_scout/utils.py
"""contact_scout.utils: Канонизация URL и вспомогательные функции дедупликации."""

from __future__ import annotations

import re
from typing import Collection, Final, List, Sequence
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from contact_scout.errors import InvalidURL
from contact_scout.logger import logger

__all__: Sequence[str] = (
    "canonicalize_url",
    "try_canonicalize",
    "try_urljoin",
    "is_http_url",
    "extract_host",
    "remove_duplicates",
)

TRACKING_PARAMS: Final[frozenset[str]] = frozenset({"fbclid", "gclid"})
TRACKING_PREFIX: Final[str] = "utm_"
_DEFAULT_PORTS: Final[dict[str, int]] = {"http": 80, "https": 443}
_TRAILING_SLASHES_RE = re.compile(r"/+$")


def _is_tracking_param(name: str) -> bool:
    lowered = name.lower()
    return lowered.startswith(TRACKING_PREFIX) or lowered in TRACKING_PARAMS


def canonicalize_url(raw: str) -> str:
    """Приводит URL к стабильному ключу дедупликации.

    Убирает фрагмент и трекинговые параметры (``utm_*``, ``fbclid``, ``gclid``),
    сортирует остальные параметры по имени (стабильно), снимает один
    завершающий слеш у пути длиннее ``/``. Схема и хост приводятся к нижнему
    регистру, порт по умолчанию отбрасывается.

    Raises
    ------
    InvalidURL
        Если строка не является абсолютным URL.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidURL(raw, "empty URL")
    try:
        parts = urlsplit(raw.strip())
        port = parts.port
    except ValueError as exc:
        raise InvalidURL(raw, str(exc)) from exc
    if not parts.scheme or not parts.hostname:
        raise InvalidURL(raw, "not an absolute URL")

    scheme = parts.scheme.lower()
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    netloc = host if port is None or _DEFAULT_PORTS.get(scheme) == port else f"{host}:{port}"
    if parts.username:
        userinfo = parts.username + (f":{parts.password}" if parts.password else "")
        netloc = f"{userinfo}@{netloc}"

    params = [
        (name, value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _is_tracking_param(name)
    ]
    params.sort(key=lambda item: item[0])
    query = urlencode(params)

    path = _TRAILING_SLASHES_RE.sub("/", parts.path or "/")
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]

    return urlunsplit((scheme, netloc, path, query, ""))


def try_canonicalize(raw: str) -> str | None:
    """Как :func:`canonicalize_url`, но возвращает ``None`` вместо исключения."""
    try:
        return canonicalize_url(raw)
    except InvalidURL:
        logger.debug("Cannot canonicalize URL: %r", raw)
        return None


def try_urljoin(base: str, href: str) -> str:
    """``urljoin`` для сырого href со страницы; некорректный href даёт ``""``."""
    try:
        return urljoin(base, href)
    except ValueError:
        logger.debug("Cannot resolve href %r against %s", href, base)
        return ""


def is_http_url(raw: str) -> bool:
    """Проверяет, что строка является абсолютным http(s) URL."""
    if not isinstance(raw, str):
        return False
    try:
        parts = urlsplit(raw.strip())
        parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in ("http", "https") and bool(parts.hostname)


def extract_host(url: str) -> str:
    """Возвращает хост с портом (без учётных данных) в нижнем регистре."""
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    return host if port is None else f"{host}:{port}"


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
