"""Keyword lexicon for comment-block help sections."""

from __future__ import annotations

from enum import Enum


class Keyword(str, Enum):
    """Recognised section keywords, declared in canonical order."""

    SYNOPSIS = "SYNOPSIS"
    DESCRIPTION = "DESCRIPTION"
    EXAMPLE = "EXAMPLE"
    NOTES = "NOTES"
    LINK = "LINK"
    COMPONENT = "COMPONENT"
    FUNCTIONALITY = "FUNCTIONALITY"
    ROLE = "ROLE"

    @property
    def ordinal(self) -> int:
        return KEYWORD_ORDER.index(self)

    @classmethod
    def lookup(cls, token: str) -> "Keyword | None":
        """Return the keyword matching ``token`` case-insensitively."""
        return _BY_TOKEN.get(token.strip().upper())


KEYWORD_ORDER: tuple[Keyword, ...] = tuple(Keyword)

REPEATABLE_KEYWORDS: frozenset[Keyword] = frozenset({Keyword.EXAMPLE})

_BY_TOKEN: dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}


__all__ = ["KEYWORD_ORDER", "Keyword", "REPEATABLE_KEYWORDS"]
