# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping
from contextlib import asynccontextmanager
from typing import Union

import pytest
from aiohttp import web

from contact_scout.config import CrawlerConfig

#: route value: markup string (200 text/html) or a ready aiohttp handler
Route = Union[str, Callable]


def page(body: str, title: str | None = None) -> str:
    """Wrap *body* into a minimal HTML document."""
    head = f"<head><title>{title}</title></head>" if title is not None else ""
    return f"<html>{head}<body>{body}</body></html>"


def make_app(routes: Mapping[str, Route]) -> web.Application:
    """Build an aiohttp app serving static markup (or custom handlers) per path."""
    app = web.Application()
    for path, route in routes.items():
        if callable(route):
            app.router.add_get(path, route)
            continue

        async def handler(_request, _markup=route):
            return web.Response(text=_markup, content_type="text/html")

        app.router.add_get(path, handler)
    return app


@asynccontextmanager
async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def crawler_config() -> CrawlerConfig:
    """Return a CrawlerConfig suitable for local test servers."""
    return CrawlerConfig(timeout=2.0, user_agent="TestAgent/1.0")
