"""Render help metadata into Markdown and Confluence documents."""

from __future__ import annotations

from .errors import (
    HelpDocError,
    MalformedBlockError,
    MissingSectionWarning,
    TypeResolutionError,
    UnsupportedSourceError,
)
from .models import Example, HelpModel, Parameter, RelatedLink, TypeReference
from .orchestrator import Orchestrator
from .rendering import DialectName, RenderOptions, render_document

__version__ = "0.1.0"

__all__ = [
    "DialectName",
    "Example",
    "HelpDocError",
    "HelpModel",
    "MalformedBlockError",
    "MissingSectionWarning",
    "Orchestrator",
    "Parameter",
    "RelatedLink",
    "RenderOptions",
    "TypeReference",
    "TypeResolutionError",
    "UnsupportedSourceError",
    "render_document",
]
