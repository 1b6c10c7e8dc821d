"""Exception hierarchy for helpdoc."""

from __future__ import annotations


class HelpDocError(RuntimeError):
    """Base class for fatal helpdoc errors."""


class UnsupportedSourceError(HelpDocError):
    """Raised when a reference resolves to no retrievable help metadata."""


class MalformedBlockError(HelpDocError, ValueError):
    """Raised when a comment block contains no recognised keyword."""


class TypeResolutionError(LookupError):
    """Raised when a type name has no documentation reference.

    Callers recover by rendering the bare type name.
    """


class MissingSectionWarning(UserWarning):
    """Issued when an optional section is absent from the source."""


__all__ = [
    "HelpDocError",
    "MalformedBlockError",
    "MissingSectionWarning",
    "TypeResolutionError",
    "UnsupportedSourceError",
]
