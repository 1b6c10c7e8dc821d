"""Placeholder prose for sections the source leaves empty."""

from __future__ import annotations

from jinja2.utils import generate_lorem_ipsum


def filler_text(paragraphs: int = 1, *, min_words: int = 12, max_words: int = 40) -> str:
    """Return lorem-ipsum paragraphs separated by blank lines."""
    return str(generate_lorem_ipsum(n=paragraphs, html=False, min=min_words, max=max_words))


__all__ = ["filler_text"]
