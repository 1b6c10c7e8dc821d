"""Render help models into dialect documents.

Each section generator is a function of the model and a per-render context
and returns a list of blocks. :func:`render_document` calls them in a fixed
order and separates blocks with blank lines.
"""

from __future__ import annotations

import textwrap
import warnings
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..errors import MissingSectionWarning, TypeResolutionError
from ..logging import get_logger
from ..models import Example, HelpModel, Parameter
from ..parsing.sectioner import is_rule, is_verbatim
from ..providers.types import TypeResolver
from .constants import (
    CALLABLE_SECTIONS,
    COMMENT_SECTIONS,
    ENTRY_INCREMENT,
    HEADER_INCREMENT,
    SECTION_INCREMENT,
    SECTION_TITLES,
    VALID_BASE_LEVELS,
)
from .dialects import Dialect, DialectName, get_dialect
from .filler import filler_text
from .links import LinkClassifier
from .syntax import build_syntax_lines

logger = get_logger("rendering")


@dataclass(frozen=True)
class RenderOptions:
    """All per-call rendering settings."""

    dialect: Union[DialectName, str] = DialectName.MARKDOWN
    heading_level: int = 1
    fill_missing: bool = False
    code_language: Optional[str] = None
    type_resolver: Optional[TypeResolver] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dialect", DialectName.parse(self.dialect))
        if self.heading_level not in VALID_BASE_LEVELS:
            raise ValueError(
                f"heading_level must be one of {sorted(VALID_BASE_LEVELS)}, got {self.heading_level}"
            )


@dataclass
class _RenderContext:
    model: HelpModel
    options: RenderOptions
    dialect: Dialect
    links: LinkClassifier
    types: TypeResolver

    def level(self, increment: int) -> int:
        return self.options.heading_level + increment

    def heading(self, text: str, increment: int) -> str:
        return self.dialect.heading(self.dialect.escape(text), self.level(increment))

    def paragraph(self, text: str) -> str:
        return self.dialect.paragraph(self.dialect.escape(text))

    def missing(self, section: str) -> List[str]:
        warnings.warn(
            f"{self.model.name}: no {section} in help source",
            MissingSectionWarning,
            stacklevel=4,
        )
        if not self.options.fill_missing:
            return []
        return [self.paragraph(chunk) for chunk in filler_text().split("\n\n") if chunk.strip()]


SectionGenerator = Callable[[HelpModel, _RenderContext], List[str]]


def _render_header(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(model.name, HEADER_INCREMENT)]
    if model.synopsis:
        blocks.append(ctx.paragraph(model.synopsis))
    else:
        blocks.extend(ctx.missing("synopsis"))

    attributes = [
        (label, value)
        for label, value in (
            ("Component", model.component),
            ("Functionality", model.functionality),
            ("Role", model.role),
        )
        if value
    ]
    if attributes:
        items = [ctx.dialect.escape(f"{label}: {value}") for label, value in attributes]
        blocks.append(ctx.dialect.list_items(items))
    return blocks


def _render_syntax(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["syntax"], SECTION_INCREMENT)]
    for line in build_syntax_lines(model):
        blocks.append(ctx.dialect.code_block([line]))
    return blocks


def _render_description(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["description"], SECTION_INCREMENT)]
    body = _text_blocks(model.description, ctx)
    blocks.extend(body or ctx.missing("description"))
    return blocks


def _render_examples(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["examples"], SECTION_INCREMENT)]
    if not model.examples:
        blocks.extend(ctx.missing("examples"))
        return blocks
    for number, example in enumerate(model.examples, start=1):
        blocks.extend(_render_example(number, example, ctx))
    return blocks


def _render_example(number: int, example: Example, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(f"Example {number}", ENTRY_INCREMENT)]
    if example.code:
        blocks.append(ctx.dialect.code_block(example.code, ctx.options.code_language))
    remarks = [chunk.strip() for chunk in (example.remarks or "").split("\n\n") if chunk.strip()]
    if remarks:
        blocks.extend(ctx.paragraph(chunk) for chunk in remarks)
    else:
        blocks.extend(ctx.missing(f"remarks for example {number}"))
    return blocks


def _render_parameters(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["parameters"], SECTION_INCREMENT)]
    for param in model.sorted_parameters():
        blocks.append(ctx.heading(f"-{param.name}", ENTRY_INCREMENT))
        blocks.append(_parameter_table(param, ctx.dialect))
    return blocks


def _parameter_table(param: Parameter, dialect: Dialect) -> str:
    headers: List[str] = ["Type"]
    values: List[str] = [param.type]
    if param.aliases:
        headers.append("Aliases")
        values.append(", ".join(param.aliases))
    headers.extend(["Position", "Default value", "Required", "Accept pipeline input"])
    values.extend(
        [
            "Named" if param.position is None else str(param.position),
            param.default_value if param.default_value is not None else "None",
            str(param.mandatory),
            str(param.accepts_pipeline_input),
        ]
    )
    return dialect.table(
        [dialect.escape(header) for header in headers],
        [[dialect.escape(value) for value in values]],
    )


def _render_inputs(model: HelpModel, ctx: _RenderContext) -> List[str]:
    return _render_types("inputs", model.input_types, ctx)


def _render_outputs(model: HelpModel, ctx: _RenderContext) -> List[str]:
    return _render_types("outputs", model.output_types, ctx)


def _render_types(section: str, type_names: Sequence[str], ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES[section], SECTION_INCREMENT)]
    for type_name in type_names:
        try:
            reference = ctx.types.lookup(type_name)
        except TypeResolutionError as exc:
            logger.debug("Rendering bare type name: %s", exc)
            text = ctx.dialect.escape(type_name)
        else:
            if reference.documentation_uri:
                text = ctx.dialect.link(reference.name, reference.documentation_uri)
            else:
                text = ctx.dialect.escape(reference.name)
        blocks.append(ctx.dialect.heading(text, ctx.level(ENTRY_INCREMENT)))
    return blocks


def _render_notes(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["notes"], SECTION_INCREMENT)]
    body = _text_blocks(model.notes, ctx, keep_rules=True)
    blocks.extend(body or ctx.missing("notes"))
    return blocks


def _render_related_links(model: HelpModel, ctx: _RenderContext) -> List[str]:
    blocks = [ctx.heading(SECTION_TITLES["related_links"], SECTION_INCREMENT)]
    if not model.related_links:
        warnings.warn(
            f"{model.name}: no related links in help source",
            MissingSectionWarning,
            stacklevel=3,
        )
        return blocks

    items: List[str] = []
    for link in model.related_links:
        classified = ctx.links.classify_link(link)
        if classified.uri:
            items.append(ctx.dialect.link(classified.label, classified.uri))
        else:
            items.append(ctx.dialect.escape(classified.label))
    blocks.append(ctx.dialect.list_items(items))
    return blocks


def _text_blocks(lines: Sequence[str], ctx: _RenderContext, *, keep_rules: bool = False) -> List[str]:
    """Group model text lines into paragraphs, code blocks and rules."""
    blocks: List[str] = []
    code: List[str] = []

    def flush_code() -> None:
        if code:
            while code and not code[-1]:
                code.pop()
            dedented = textwrap.dedent("\n".join(code)).splitlines()
            blocks.append(ctx.dialect.code_block(dedented, ctx.options.code_language))
            code.clear()

    for line in lines:
        if not line.strip():
            if code:
                code.append("")
            continue
        if keep_rules and is_rule(line):
            flush_code()
            blocks.append(ctx.dialect.rule())
        elif is_verbatim(line):
            code.append(line.rstrip())
        else:
            flush_code()
            blocks.append(ctx.paragraph(line.strip()))
    flush_code()
    return blocks


_GENERATORS: Dict[str, SectionGenerator] = {
    "header": _render_header,
    "syntax": _render_syntax,
    "description": _render_description,
    "examples": _render_examples,
    "parameters": _render_parameters,
    "inputs": _render_inputs,
    "outputs": _render_outputs,
    "notes": _render_notes,
    "related_links": _render_related_links,
}


def section_order(model: HelpModel) -> Sequence[str]:
    return CALLABLE_SECTIONS if model.is_callable else COMMENT_SECTIONS


def render_document(model: HelpModel, options: Optional[RenderOptions] = None) -> List[str]:
    """Render ``model`` into an ordered list of text fragments."""
    options = options or RenderOptions()
    ctx = _RenderContext(
        model=model,
        options=options,
        dialect=get_dialect(options.dialect),
        links=LinkClassifier(model.name),
        types=options.type_resolver or TypeResolver(),
    )

    fragments: List[str] = []
    for name in section_order(model):
        for block in _GENERATORS[name](model, ctx):
            fragments.append(block)
            fragments.append("")
    while fragments and not fragments[-1]:
        fragments.pop()
    logger.debug(
        "Rendered %s as %s (%d fragments)", model.name, ctx.dialect.name.value, len(fragments)
    )
    return fragments


def render_text(model: HelpModel, options: Optional[RenderOptions] = None) -> str:
    """Render ``model`` and join the fragments into one document."""
    return "\n".join(render_document(model, options)) + "\n"


__all__ = ["RenderOptions", "render_document", "render_text", "section_order"]
