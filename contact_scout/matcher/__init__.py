"""contact_scout.matcher: Многоязычный поиск контактных фраз."""

from .phrases import (
    DEFAULT_PATH_HINTS,
    DEFAULT_PHRASES,
    PhraseMatcher,
    PhraseTable,
    normalize_text,
)

__all__ = ["DEFAULT_PATH_HINTS", "DEFAULT_PHRASES", "PhraseMatcher", "PhraseTable", "normalize_text"]
