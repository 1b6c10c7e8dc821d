"""Output dialects and the capability set each one provides."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

from markupsafe import escape as html_escape

MAX_HEADING_LEVEL = 6
"""Deepest heading any dialect renders; computed levels beyond it are clamped."""


class DialectName(str, Enum):
    """Supported output dialects."""

    MARKDOWN = "markdown"
    CONFLUENCE_WIKI = "confluence-wiki"
    CONFLUENCE_HTML = "confluence-html"

    @classmethod
    def parse(cls, value: Union[str, "DialectName"]) -> "DialectName":
        """Accept enum members, values, or names such as ``ConfluenceWiki``."""
        if isinstance(value, DialectName):
            return value
        folded = str(value).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if folded == member.value.replace("-", ""):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown dialect '{value}'. Expected one of: {choices}")


class Dialect(ABC):
    """Rendering primitives for one markup dialect.

    Callers pass text through :meth:`escape` before handing it to
    :meth:`heading`, :meth:`paragraph`, :meth:`table` or :meth:`list_items`;
    :meth:`code_block` and :meth:`link` take raw text and encode it themselves.
    """

    name: DialectName

    @staticmethod
    def clamp(level: int) -> int:
        return max(1, min(level, MAX_HEADING_LEVEL))

    @abstractmethod
    def heading(self, text: str, level: int) -> str:
        ...

    @abstractmethod
    def code_block(self, lines: Sequence[str], language: Optional[str] = None) -> str:
        ...

    @abstractmethod
    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        ...

    @abstractmethod
    def link(self, label: str, uri: str) -> str:
        ...

    @abstractmethod
    def list_items(self, items: Sequence[str]) -> str:
        ...

    @abstractmethod
    def rule(self) -> str:
        ...

    def escape(self, text: str) -> str:
        return text

    def paragraph(self, text: str) -> str:
        return text


class MarkdownDialect(Dialect):
    name = DialectName.MARKDOWN

    def heading(self, text: str, level: int) -> str:
        return f"{'#' * self.clamp(level)} {text}"

    def code_block(self, lines: Sequence[str], language: Optional[str] = None) -> str:
        fence = "```"
        return "\n".join([f"{fence}{language or ''}", *lines, fence])

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        def _row(cells: Sequence[str]) -> str:
            return "| " + " | ".join(cell.replace("|", "\\|") for cell in cells) + " |"

        output = [_row(headers), _row(["---"] * len(headers))]
        output.extend(_row(row) for row in rows)
        return "\n".join(output)

    def link(self, label: str, uri: str) -> str:
        return f"[{label}]({uri})"

    def list_items(self, items: Sequence[str]) -> str:
        return "\n".join(f"- {item}" for item in items)

    def rule(self) -> str:
        return "---"


class ConfluenceWikiDialect(Dialect):
    name = DialectName.CONFLUENCE_WIKI

    def heading(self, text: str, level: int) -> str:
        return f"h{self.clamp(level)}. {text}"

    def code_block(self, lines: Sequence[str], language: Optional[str] = None) -> str:
        opener = f"{{code:language={language}}}" if language else "{code}"
        return "\n".join([opener, *lines, "{code}"])

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        def _cell(value: str) -> str:
            return value.replace("|", "\\|") or " "

        output = ["||" + "||".join(_cell(header) for header in headers) + "||"]
        output.extend("|" + "|".join(_cell(cell) for cell in row) + "|" for row in rows)
        return "\n".join(output)

    def link(self, label: str, uri: str) -> str:
        return f"[{label}|{uri}]"

    def list_items(self, items: Sequence[str]) -> str:
        return "\n".join(f"* {item}" for item in items)

    def rule(self) -> str:
        return "----"


class ConfluenceHtmlDialect(Dialect):
    """Confluence storage-format fragments."""

    name = DialectName.CONFLUENCE_HTML

    def escape(self, text: str) -> str:
        return str(html_escape(text))

    def heading(self, text: str, level: int) -> str:
        level = self.clamp(level)
        return f"<h{level}>{text}</h{level}>"

    def paragraph(self, text: str) -> str:
        return f"<p>{text}</p>"

    def code_block(self, lines: Sequence[str], language: Optional[str] = None) -> str:
        body = "\n".join(lines).replace("]]>", "]]]]><![CDATA[>")
        parts = ['<ac:structured-macro ac:name="code">']
        if language:
            parts.append(f'<ac:parameter ac:name="language">{self.escape(language)}</ac:parameter>')
        parts.append(f"<ac:plain-text-body><![CDATA[{body}]]></ac:plain-text-body>")
        parts.append("</ac:structured-macro>")
        return "".join(parts)

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        output = ["<table><tbody>"]
        output.append("<tr>" + "".join(f"<th>{header}</th>" for header in headers) + "</tr>")
        for row in rows:
            output.append("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>")
        output.append("</tbody></table>")
        return "".join(output)

    def link(self, label: str, uri: str) -> str:
        return f'<a href="{self.escape(uri)}">{self.escape(label)}</a>'

    def list_items(self, items: Sequence[str]) -> str:
        return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"

    def rule(self) -> str:
        return "<hr />"


_DIALECTS: Dict[DialectName, Dialect] = {
    DialectName.MARKDOWN: MarkdownDialect(),
    DialectName.CONFLUENCE_WIKI: ConfluenceWikiDialect(),
    DialectName.CONFLUENCE_HTML: ConfluenceHtmlDialect(),
}


def get_dialect(name: Union[str, DialectName]) -> Dialect:
    """Return the stateless dialect implementation for ``name``."""
    return _DIALECTS[DialectName.parse(name)]


def available_dialects() -> List[str]:
    return [member.value for member in DialectName]


__all__ = [
    "ConfluenceHtmlDialect",
    "ConfluenceWikiDialect",
    "Dialect",
    "DialectName",
    "MAX_HEADING_LEVEL",
    "MarkdownDialect",
    "available_dialects",
    "get_dialect",
]
