"""Core data models shared across helpdoc components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

KIND_CALLABLE = "callable"
KIND_COMMENT = "comment"


@dataclass(frozen=True)
class TypeReference:
    """A type name paired with its external documentation link."""

    name: str
    documentation_uri: Optional[str] = None


@dataclass
class Example:
    """One usage example: code lines plus optional remarks."""

    code: List[str] = field(default_factory=list)
    remarks: Optional[str] = None


@dataclass
class Parameter:
    """Metadata for a single parameter of a callable entity.

    ``position`` is ``None`` for named (non-positional) parameters.
    """

    name: str
    type: str = "Object"
    position: Optional[int] = None
    mandatory: bool = False
    aliases: List[str] = field(default_factory=list)
    default_value: Optional[str] = None
    accepts_pipeline_input: bool = False

    @property
    def sort_key(self) -> float:
        return math.inf if self.position is None else float(self.position)

    @property
    def is_switch(self) -> bool:
        return self.type.lower() in {"switch", "switchparameter"}


@dataclass
class RelatedLink:
    """A related link entry; at least one of the fields is populated."""

    label_text: Optional[str] = None
    uri: Optional[str] = None

    def __post_init__(self) -> None:
        if not (self.label_text or self.uri):
            raise ValueError("RelatedLink requires a label or a uri")


@dataclass
class HelpModel:
    """Normalised, dialect-agnostic help record for one documented entity."""

    name: str
    kind: str = KIND_CALLABLE
    synopsis: Optional[str] = None
    description: List[str] = field(default_factory=list)
    examples: List[Example] = field(default_factory=list)
    parameters: List[Parameter] = field(default_factory=list)
    parameter_sets: List[List[Parameter]] = field(default_factory=list)
    input_types: List[str] = field(default_factory=list)
    output_types: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    related_links: List[RelatedLink] = field(default_factory=list)
    component: Optional[str] = None
    functionality: Optional[str] = None
    role: Optional[str] = None
    accepts_common_parameters: bool = False

    @property
    def is_callable(self) -> bool:
        return self.kind == KIND_CALLABLE

    def sorted_parameters(self) -> List[Parameter]:
        """Return parameters by ascending position, named parameters last."""
        return sorted(self.parameters, key=lambda param: param.sort_key)

    def finalize(self) -> "HelpModel":
        """Validate invariants and normalise derived collections in place."""
        if not self.name or not self.name.strip():
            raise ValueError("HelpModel.name must not be empty")
        self.name = self.name.strip()
        if self.kind not in {KIND_CALLABLE, KIND_COMMENT}:
            raise ValueError(f"Unknown help model kind: {self.kind}")

        known = {param.name for param in self.parameters}
        for parameter_set in self.parameter_sets:
            for param in parameter_set:
                if param.name not in known:
                    raise ValueError(
                        f"Parameter set references unknown parameter '{param.name}'"
                    )

        self.input_types = unique_ordered(self.input_types)
        self.output_types = unique_ordered(self.output_types)
        return self


def unique_ordered(values: Sequence[str]) -> List[str]:
    """Deduplicate while keeping the first appearance of each value."""
    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


__all__ = [
    "Example",
    "HelpModel",
    "KIND_CALLABLE",
    "KIND_COMMENT",
    "Parameter",
    "RelatedLink",
    "TypeReference",
    "unique_ordered",
]
