"""Dialect rendering of help models."""

from .dialects import (
    MAX_HEADING_LEVEL,
    ConfluenceHtmlDialect,
    ConfluenceWikiDialect,
    Dialect,
    DialectName,
    MarkdownDialect,
    available_dialects,
    get_dialect,
)
from .engine import RenderOptions, render_document, render_text, section_order
from .links import ClassifiedLink, LinkClassifier, is_absolute_uri
from .syntax import COMMON_PARAMETERS_MARKER, build_syntax_lines, format_parameter

__all__ = [
    "COMMON_PARAMETERS_MARKER",
    "ClassifiedLink",
    "ConfluenceHtmlDialect",
    "ConfluenceWikiDialect",
    "Dialect",
    "DialectName",
    "LinkClassifier",
    "MAX_HEADING_LEVEL",
    "MarkdownDialect",
    "RenderOptions",
    "available_dialects",
    "build_syntax_lines",
    "format_parameter",
    "get_dialect",
    "is_absolute_uri",
    "render_document",
    "render_text",
    "section_order",
]
