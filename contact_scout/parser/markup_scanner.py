"""Shallow markup scanning for contact affordances.

This is **not** a DOM builder: every element kind is collected in its own
independent pass, and only a handful of attributes are read.  The passes run
in a fixed order so the output is reproducible:

* ``link``        : ``<a>``; text is the inner text, href is ``href``.
* ``button``      : ``<button>``; href falls back ``href`` → ``data-href``.
* ``role-button`` : any element with ``role="button"``; ``data-href`` → ``href``.
* ``input``       : ``<input type="submit|button">``; text falls back
  ``value`` → ``aria-label`` → ``name``, href is ``formaction``.

Entries with neither text nor href are dropped.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from contact_scout.crawler.models import UNTITLED, Candidate

__all__: Sequence[str] = ("extract_title", "extract_candidates", "scan_markup")

_WHITESPACE_RE = re.compile(r"\s+")

LINK = "link"
BUTTON = "button"
ROLE_BUTTON = "role-button"
INPUT = "input"


def _collapse(text: str | None) -> str:
    # \s covers U+00A0, so a decoded &nbsp; becomes a plain space here
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def _attr(tag: Tag, *names: str) -> str:
    for name in names:
        value = tag.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        if value and value.strip():
            return value.strip()
    return ""


def _inner_text(tag: Tag) -> str:
    return _collapse(tag.get_text(" "))


def _soup(markup: str | bytes | BeautifulSoup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup or "", "html.parser")


def extract_title(markup: str | bytes | BeautifulSoup) -> str:
    """Content of the first ``<title>``, collapsed; ``"Untitled"`` if absent."""
    title_tag = _soup(markup).find("title")
    title = _collapse(title_tag.get_text()) if isinstance(title_tag, Tag) else ""
    return title or UNTITLED


def extract_candidates(markup: str | bytes | BeautifulSoup, page_url: str) -> list[Candidate]:
    """Return interactive candidates found in *markup* (see module docstring)."""
    soup = _soup(markup)
    found: list[Candidate] = []

    def add(element: str, text: str, href: str) -> None:
        if text or href:
            found.append(Candidate(element=element, text=text, href=href, source_url=page_url))

    for tag in soup.find_all("a"):
        add(LINK, _inner_text(tag), _attr(tag, "href"))

    for tag in soup.find_all("button"):
        add(BUTTON, _inner_text(tag), _attr(tag, "href", "data-href"))

    for tag in soup.find_all(attrs={"role": True}):
        if _attr(tag, "role").lower() != "button":
            continue
        add(ROLE_BUTTON, _inner_text(tag), _attr(tag, "data-href", "href"))

    for tag in soup.find_all("input"):
        if _attr(tag, "type").lower() not in ("submit", "button"):
            continue
        text = _collapse(_attr(tag, "value", "aria-label", "name"))
        add(INPUT, text, _attr(tag, "formaction"))

    return found


def scan_markup(markup: str | bytes, page_url: str) -> tuple[str, list[Candidate]]:
    """Parse once and return ``(title, candidates)``."""
    soup = _soup(markup)
    return extract_title(soup), extract_candidates(soup, page_url)
