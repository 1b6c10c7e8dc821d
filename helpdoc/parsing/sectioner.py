"""Split keyword-delimited comment blocks into help model sections.

Sectioning runs in two passes. :meth:`CommentBlockSectioner.tokenize` walks the
block once and yields a :class:`KeywordToken` for every keyword line; the
slicing pass then cuts the body between consecutive tokens. Text ahead of the
first keyword is discarded.

Inside a section body, lines indented by four or more whitespace characters
are verbatim and are kept exactly as written. All other non-blank lines are
narrative and are joined into one line per paragraph.
"""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..errors import MalformedBlockError
from ..logging import get_logger
from ..models import KIND_COMMENT, Example, HelpModel, RelatedLink
from .keywords import REPEATABLE_KEYWORDS, Keyword

VERBATIM_INDENT = 4

RULE_PATTERN = re.compile(r"^\s*(?:-{3,}|={3,})\s*$")

_KEYWORD_LINE = re.compile(r"^\.?(?P<token>[A-Za-z]+)$")

logger = get_logger("parsing")


@dataclass(frozen=True)
class KeywordToken:
    """A keyword marker and the index of the line it sits on."""

    keyword: Keyword
    line_index: int


@dataclass
class Section:
    """Raw body lines belonging to one keyword occurrence."""

    keyword: Keyword
    lines: List[str] = field(default_factory=list)


def is_verbatim(line: str) -> bool:
    """Return True when ``line`` carries the verbatim indentation."""
    if not line.strip():
        return False
    return len(line) - len(line.lstrip()) >= VERBATIM_INDENT


def is_rule(line: str) -> bool:
    return bool(RULE_PATTERN.match(line))


class CommentBlockSectioner:
    """Turns a flat comment block into keyword sections and help models."""

    def __init__(self, comment_marker: Optional[str] = "#") -> None:
        self.comment_marker = comment_marker or None

    def strip_marker(self, line: str) -> str:
        """Remove the comment marker and one following space, if present."""
        if not self.comment_marker:
            return line.rstrip()
        stripped = line.lstrip()
        if not stripped.startswith(self.comment_marker):
            return line.rstrip()
        content = stripped[len(self.comment_marker):]
        if content.startswith(" "):
            content = content[1:]
        return content.rstrip()

    def match_keyword(self, line: str) -> Optional[Keyword]:
        match = _KEYWORD_LINE.match(self.strip_marker(line).strip())
        if not match:
            return None
        return Keyword.lookup(match.group("token"))

    def tokenize(self, lines: Sequence[str]) -> List[KeywordToken]:
        tokens: List[KeywordToken] = []
        for index, line in enumerate(lines):
            keyword = self.match_keyword(line)
            if keyword is not None:
                tokens.append(KeywordToken(keyword=keyword, line_index=index))
        return tokens

    def split(self, text: str) -> List[Section]:
        """Return every keyword section in source order, repeats included."""
        lines = text.splitlines()
        tokens = self.tokenize(lines)
        if not tokens:
            raise MalformedBlockError("Comment block contains no recognised help keyword")

        sections: List[Section] = []
        for position, token in enumerate(tokens):
            start = token.line_index + 1
            end = tokens[position + 1].line_index if position + 1 < len(tokens) else len(lines)
            body = [self.strip_marker(line) for line in lines[start:end]]
            sections.append(Section(keyword=token.keyword, lines=body))
        return sections

    def parse(self, text: str, *, name: str) -> HelpModel:
        """Build a comment-kind help model named ``name`` from ``text``."""
        sections = self.split(text)
        model = HelpModel(name=name, kind=KIND_COMMENT)
        seen: set[Keyword] = set()

        for section in sections:
            keyword = section.keyword
            if keyword in seen and keyword not in REPEATABLE_KEYWORDS:
                logger.debug("Ignoring repeated %s section in help for %s", keyword.value, name)
                continue
            seen.add(keyword)
            self._apply(model, section)

        return model.finalize()

    def _apply(self, model: HelpModel, section: Section) -> None:
        keyword = section.keyword
        if keyword is Keyword.SYNOPSIS:
            model.synopsis = _scalar(section.lines)
        elif keyword is Keyword.DESCRIPTION:
            model.description = reflow(section.lines)
        elif keyword is Keyword.EXAMPLE:
            model.examples.append(_example(section.lines))
        elif keyword is Keyword.NOTES:
            model.notes = reflow(section.lines, keep_rules=True)
        elif keyword is Keyword.LINK:
            model.related_links = [
                RelatedLink(label_text=line.strip()) for line in section.lines if line.strip()
            ]
        elif keyword is Keyword.COMPONENT:
            model.component = _scalar(section.lines)
        elif keyword is Keyword.FUNCTIONALITY:
            model.functionality = _scalar(section.lines)
        elif keyword is Keyword.ROLE:
            model.role = _scalar(section.lines)


def reflow(lines: Iterable[str], *, keep_rules: bool = False) -> List[str]:
    """Join narrative lines into paragraphs, keeping verbatim lines intact.

    A blank line between two verbatim lines is kept as ``""`` so code blocks
    retain their spacing; other blank lines only end paragraphs.
    """
    output: List[str] = []
    paragraph: List[str] = []
    pending_blank = False

    def flush() -> None:
        if paragraph:
            output.append(" ".join(paragraph))
            paragraph.clear()

    for line in lines:
        if not line.strip():
            flush()
            pending_blank = True
            continue
        if keep_rules and is_rule(line):
            flush()
            output.append(line.strip())
        elif is_verbatim(line):
            flush()
            if pending_blank and output and is_verbatim(output[-1]):
                output.append("")
            output.append(line.rstrip())
        else:
            paragraph.append(line.strip())
        pending_blank = False

    flush()
    return output


def _scalar(lines: Iterable[str]) -> Optional[str]:
    text = " ".join(line.strip() for line in lines if line.strip())
    return text or None


def _example(lines: Sequence[str]) -> Example:
    trimmed = _trim_blank(lines)
    if any(is_verbatim(line) for line in trimmed):
        code_block: List[str] = []
        for line in trimmed:
            if is_verbatim(line):
                code_block.append(line)
            elif not line.strip() and code_block and code_block[-1]:
                code_block.append("")
        code = textwrap.dedent("\n".join(_trim_blank(code_block))).splitlines()
        narrative = [line for line in trimmed if not is_verbatim(line)]
        return Example(code=code, remarks=_paragraphs(narrative))

    non_blank = [index for index, line in enumerate(trimmed) if line.strip()]
    if not non_blank:
        return Example(code=[], remarks=None)
    first = non_blank[0]
    return Example(code=[trimmed[first].strip()], remarks=_paragraphs(trimmed[first + 1:]))


def _paragraphs(lines: Sequence[str]) -> Optional[str]:
    paragraphs = reflow(line.strip() for line in lines)
    text = "\n\n".join(paragraphs)
    return text or None


def _trim_blank(lines: Sequence[str]) -> List[str]:
    items = list(lines)
    while items and not items[0].strip():
        items.pop(0)
    while items and not items[-1].strip():
        items.pop()
    return items


def extract_comment_block(text: str, comment_marker: str = "#") -> str:
    """Return the help comment block embedded in a YAML document.

    Candidate blocks are contiguous runs of full-line comments (blank lines
    allowed inside a run). The first run holding a keyword wins; otherwise the
    first run is returned so the caller reports a malformed block.
    """
    runs: List[List[str]] = []
    current: List[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(comment_marker):
            current.append(line)
            continue
        if not stripped and current:
            current.append(line)
            continue
        if current:
            runs.append(current)
            current = []
    if current:
        runs.append(current)

    if not runs:
        return ""

    sectioner = CommentBlockSectioner(comment_marker)
    chosen = next((run for run in runs if sectioner.tokenize(run)), runs[0])
    return "\n".join(_trim_blank(chosen))


def build_help_model(text: str, *, name: str, comment_marker: Optional[str] = "#") -> HelpModel:
    """Section ``text`` and return the resulting help model."""
    return CommentBlockSectioner(comment_marker).parse(text, name=name)


__all__ = [
    "CommentBlockSectioner",
    "KeywordToken",
    "RULE_PATTERN",
    "Section",
    "VERBATIM_INDENT",
    "build_help_model",
    "extract_comment_block",
    "is_rule",
    "is_verbatim",
    "reflow",
]

