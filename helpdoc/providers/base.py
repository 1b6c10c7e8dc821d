"""Help provider interface consumed by the orchestrator."""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ..models import HelpModel

HelpSource = Union[HelpModel, str, None]


@runtime_checkable
class HelpProvider(Protocol):
    """Resolves a reference to a help model or raw comment-block text.

    Returning ``None`` signals that the reference has no help metadata.
    """

    def resolve(self, ref: Any) -> HelpSource:
        ...


__all__ = ["HelpProvider", "HelpSource"]
