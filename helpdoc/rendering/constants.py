"""Section ordering, titles and heading increments for rendered documents."""

from __future__ import annotations

CALLABLE_SECTIONS: tuple[str, ...] = (
    "header",
    "syntax",
    "description",
    "examples",
    "parameters",
    "inputs",
    "outputs",
    "notes",
    "related_links",
)

COMMENT_SECTIONS: tuple[str, ...] = (
    "header",
    "description",
    "examples",
    "notes",
    "related_links",
)

SECTION_TITLES: dict[str, str] = {
    "syntax": "Syntax",
    "description": "Description",
    "examples": "Examples",
    "parameters": "Parameters",
    "inputs": "Inputs",
    "outputs": "Outputs",
    "notes": "Notes",
    "related_links": "Related Links",
}

HEADER_INCREMENT = 0
SECTION_INCREMENT = 1
ENTRY_INCREMENT = 2

VALID_BASE_LEVELS: frozenset[int] = frozenset({1, 2, 3})


__all__ = [
    "CALLABLE_SECTIONS",
    "COMMENT_SECTIONS",
    "ENTRY_INCREMENT",
    "HEADER_INCREMENT",
    "SECTION_INCREMENT",
    "SECTION_TITLES",
    "VALID_BASE_LEVELS",
]
