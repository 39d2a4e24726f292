# File: tests/test_engine.py
from __future__ import annotations

import pytest

from contact_scout.engine import Engine, resolve_targets, run_crawl, validate_credits
from contact_scout.errors import InvalidRequest, InvalidURL, NoValidTargets
from tests.conftest import make_app, page, serve_app


def test_resolve_targets_dedups_in_first_seen_order():
    targets = resolve_targets(
        "https://a.com/",
        ["https://b.com/x?utm_campaign=1", "", "https://a.com#top", "   ", "https://B.com/x/"],
    )
    assert targets == ["https://a.com/", "https://b.com/x"]


def test_resolve_targets_names_offending_url():
    with pytest.raises(InvalidURL) as exc_info:
        resolve_targets("https://a.com", ["ftp://files.a.com/pub"])
    assert exc_info.value.raw == "ftp://files.a.com/pub"
    assert "ftp://files.a.com/pub" in str(exc_info.value)

    with pytest.raises(InvalidURL):
        resolve_targets("a.com/contact", [])


def test_resolve_targets_empty():
    with pytest.raises(NoValidTargets):
        resolve_targets("", [])
    with pytest.raises(NoValidTargets):
        resolve_targets(None, ["  "])


@pytest.mark.parametrize("credits", [0, -1, True, "2", 1.5, None])
def test_validate_credits_rejects(credits):
    with pytest.raises(InvalidRequest):
        validate_credits(credits)


def test_validate_credits_accepts_positive_int():
    assert validate_credits(3) == 3


def test_engine_rejects_invalid_request_before_crawling():
    engine = Engine()
    with pytest.raises(InvalidURL):
        engine.run("javascript:alert(1)", [])
    with pytest.raises(NoValidTargets):
        engine.run(None, [])


def _contact_site() -> dict:
    return {
        "/": page('<a href="/contact">Contact Us</a><a href="/about">About</a>', "Home"),
        "/about": page('<a href="/">Home</a>', "About"),
        "/contact": page("<p>form</p>", "Contact"),
    }


@pytest.mark.asyncio()
async def test_merge_dedups_matches_across_targets(crawler_config, unused_tcp_port):
    async with serve_app(make_app(_contact_site()), unused_tcp_port) as base:
        report = await run_crawl(
            f"{base}/",
            [f"{base}/about", f"{base}/?utm_source=mail"],
            max_pages=5,
            credits_to_use=2,
            config=crawler_config,
        )

    assert report.target_urls == [f"{base}/", f"{base}/about"]
    assert report.start_url == f"{base}/"
    assert len(report.per_target_results) == 2
    assert [r.total_matches for r in report.per_target_results] == [1, 1]
    assert report.pages_visited == 6
    assert report.max_pages_per_target == 5
    assert report.credits_used == 2

    assert report.total_matches == 1
    assert report.matches[0].page_url == f"{base}/"
    assert report.matches[0].href == f"{base}/contact"
    assert [p.url for p in report.pages] == [f"{base}/", f"{base}/contact", f"{base}/about"]

    data = report.to_dict()
    assert data["totalMatches"] == 1
    assert data["maxPagesPerTarget"] == 5
    assert len(data["perTargetResults"]) == 2


@pytest.mark.asyncio()
@pytest.mark.parametrize("requested,expected", [(0, 1), (-5, 1), (100, 25)])
async def test_max_pages_is_clamped(crawler_config, unused_tcp_port, requested, expected):
    async with serve_app(make_app(_contact_site()), unused_tcp_port) as base:
        report = await run_crawl(base, [], max_pages=requested, config=crawler_config)

    assert report.max_pages_per_target == expected
    assert report.pages_visited == min(expected, 3)


@pytest.mark.asyncio()
async def test_default_max_pages_from_config(unused_tcp_port):
    from contact_scout.config import CrawlerConfig

    config = CrawlerConfig(max_pages=2, timeout=2.0)
    async with serve_app(make_app(_contact_site()), unused_tcp_port) as base:
        report = await run_crawl(base, None, config=config)

    assert report.max_pages_per_target == 2
    assert [p.url for p in report.pages] == [f"{base}/", f"{base}/contact"]
