# contact_scout/crawler/fetcher.py
"""
Fetcher module: single HTTP GET with timeout, redirects and HTML check.

Per-page problems are raised as :mod:`contact_scout.errors` page errors so the
crawler can turn them into page records.  There are no retries.
"""
from __future__ import annotations

import asyncio
from typing import Final, Tuple

from aiohttp import ClientError, ClientSession

from contact_scout.crawler.models import FetchedPage
from contact_scout.errors import PageFetchError, PageHTTPError, PageSkipped

HTML_TYPES: Final[Tuple[str, ...]] = ("text/html", "application/xhtml+xml")


def is_html(content_type: str) -> bool:
    return any(t in content_type.lower() for t in HTML_TYPES)


class Fetcher:
    """Fetches pages through a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchedPage:
        """
        GET *url* following redirects.

        Raises PageFetchError on network failure or timeout, PageHTTPError on
        a non-2xx status and PageSkipped on a non-HTML content type.
        """
        try:
            async with self.session.get(url, allow_redirects=True) as resp:
                status = resp.status
                if not 200 <= status < 300:
                    raise PageHTTPError(url, status)
                ctype = resp.headers.get("Content-Type", "").strip()
                if not is_html(ctype):
                    raise PageSkipped(url, status, ctype)
                text = await resp.text(errors="replace")
                return FetchedPage(
                    url=url,
                    final_url=str(resp.url),
                    status=status,
                    content_type=ctype,
                    content=text,
                )
        except asyncio.TimeoutError as exc:
            raise PageFetchError(url, "timeout") from exc
        except ClientError as exc:
            raise PageFetchError(url, f"{type(exc).__name__}: {exc}") from exc
