"""Invocation signature reconstruction from parameter metadata."""

from __future__ import annotations

from typing import List, Sequence

from ..models import HelpModel, Parameter

COMMON_PARAMETERS_MARKER = "[<CommonParameters>]"


def format_parameter(param: Parameter) -> str:
    """Render one parameter token.

    Switches render as ``-Name``, positional parameters as ``[-Name] <Type>``
    and named ones as ``-Name <Type>``; optional parameters gain an outer
    ``[...]``.
    """
    if param.is_switch:
        token = f"-{param.name}"
    elif param.position is not None:
        token = f"[-{param.name}] <{param.type}>"
    else:
        token = f"-{param.name} <{param.type}>"
    return token if param.mandatory else f"[{token}]"


def format_parameter_set(
    name: str,
    parameters: Sequence[Parameter],
    *,
    accepts_common_parameters: bool = False,
) -> str:
    ordered = sorted(parameters, key=lambda param: param.sort_key)
    tokens = [name, *(format_parameter(param) for param in ordered)]
    if accepts_common_parameters:
        tokens.append(COMMON_PARAMETERS_MARKER)
    return " ".join(tokens)


def build_syntax_lines(model: HelpModel) -> List[str]:
    """Return one invocation line per parameter set of ``model``."""
    parameter_sets = model.parameter_sets or [list(model.parameters)]
    return [
        format_parameter_set(
            model.name,
            parameter_set,
            accepts_common_parameters=model.accepts_common_parameters,
        )
        for parameter_set in parameter_sets
    ]


__all__ = [
    "COMMON_PARAMETERS_MARKER",
    "build_syntax_lines",
    "format_parameter",
    "format_parameter_set",
]
