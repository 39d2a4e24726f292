"""Diacritic-insensitive phrase matching for contact affordances.

The dictionaries are plain data: :class:`PhraseTable` holds them in
normalized form and :class:`PhraseMatcher` only reads the table, so new
locales are added through configuration without touching the crawler.
"""
from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__: Sequence[str] = (
    "DEFAULT_PHRASES",
    "DEFAULT_PATH_HINTS",
    "PhraseTable",
    "PhraseMatcher",
    "normalize_text",
)

_WHITESPACE_RE = re.compile(r"\s+")

# English + Portuguese contact / support / sales / chat vocabulary.
DEFAULT_PHRASES: tuple[str, ...] = (
    "contact",
    "contact us",
    "contact sales",
    "get in touch",
    "reach us",
    "talk to us",
    "talk to sales",
    "request a quote",
    "get a quote",
    "book a demo",
    "request a demo",
    "schedule a call",
    "customer service",
    "customer support",
    "support",
    "help center",
    "help desk",
    "sales",
    "live chat",
    "chat with us",
    "chat",
    "whatsapp",
    "call us",
    "email us",
    "send a message",
    "fale conosco",
    "fale com",
    "contato",
    "contate-nos",
    "entre em contato",
    "atendimento",
    "central de atendimento",
    "suporte",
    "ajuda",
    "vendas",
    "fale com vendas",
    "orcamento",
    "solicite um orcamento",
    "ouvidoria",
    "converse conosco",
    "chame no whatsapp",
    "ligue",
)

DEFAULT_PATH_HINTS: tuple[str, ...] = (
    "/contact",
    "/contact-us",
    "/contato",
    "/fale-conosco",
    "/faleconosco",
    "/support",
    "/suporte",
    "/help",
    "/ajuda",
    "/atendimento",
    "/sales",
    "/vendas",
    "/chat",
    "/orcamento",
    "/quote",
    "/demo",
)


def normalize_text(text: str | None) -> str:
    """Lower-case, strip diacritics (NFD), collapse whitespace and trim."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", str(text).lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def _normalized_unique(entries: Iterable[str]) -> tuple[str, ...]:
    seen = dict.fromkeys(normalize_text(e) for e in entries)
    return tuple(e for e in seen if e)


@dataclass(frozen=True, slots=True)
class PhraseTable:
    """Immutable phrase dictionary and URL path-hint list (normalized)."""

    phrases: tuple[str, ...] = DEFAULT_PHRASES
    path_hints: tuple[str, ...] = DEFAULT_PATH_HINTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "phrases", _normalized_unique(self.phrases))
        object.__setattr__(self, "path_hints", _normalized_unique(self.path_hints))

    def extended(self, phrases: Iterable[str] = (), path_hints: Iterable[str] = ()) -> PhraseTable:
        """Return a new table with extra entries appended after the existing ones."""
        return PhraseTable(
            phrases=(*self.phrases, *phrases),
            path_hints=(*self.path_hints, *path_hints),
        )


class PhraseMatcher:
    """Tests normalized text against a :class:`PhraseTable`."""

    def __init__(self, table: PhraseTable | None = None) -> None:
        self.table = table or PhraseTable()

    def match_phrases(self, text: str | None) -> list[str]:
        """Return matched phrases in table order (substring test)."""
        normalized = normalize_text(text)
        if not normalized:
            return []
        return [phrase for phrase in self.table.phrases if phrase in normalized]

    def is_priority_url(self, text: str | None) -> bool:
        """True if the text contains a contact-ish path hint or any phrase."""
        normalized = normalize_text(text)
        if any(hint in normalized for hint in self.table.path_hints):
            return True
        return bool(self.match_phrases(normalized))
