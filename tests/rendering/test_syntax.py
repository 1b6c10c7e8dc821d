"""Tests for invocation signature reconstruction."""

from __future__ import annotations

from helpdoc.models import HelpModel, Parameter
from helpdoc.rendering.syntax import (
    COMMON_PARAMETERS_MARKER,
    build_syntax_lines,
    format_parameter,
)


def test_mandatory_positional_parameter() -> None:
    param = Parameter(name="Path", type="String", position=0, mandatory=True)
    assert format_parameter(param) == "[-Path] <String>"


def test_optional_switch_parameter() -> None:
    param = Parameter(name="Force", type="Switch", mandatory=False)
    assert format_parameter(param) == "[-Force]"


def test_mandatory_switch_has_no_brackets() -> None:
    assert format_parameter(Parameter(name="Force", type="SwitchParameter", mandatory=True)) == "-Force"


def test_named_parameters_drop_the_inner_brackets() -> None:
    assert format_parameter(Parameter(name="Name", type="String", mandatory=True)) == "-Name <String>"
    assert format_parameter(Parameter(name="Name", type="String")) == "[-Name <String>]"


def test_optional_positional_parameter_is_wrapped_twice() -> None:
    param = Parameter(name="Count", type="Int32", position=1)
    assert format_parameter(param) == "[[-Count] <Int32>]"


def test_syntax_lines_order_by_position_and_append_marker() -> None:
    force = Parameter(name="Force", type="Switch")
    path = Parameter(name="Path", type="String", position=0, mandatory=True)
    count = Parameter(name="Count", type="Int32", position=1)
    model = HelpModel(
        name="Get-Widget",
        parameters=[force, path, count],
        parameter_sets=[[force, count, path], [path]],
        accepts_common_parameters=True,
    ).finalize()

    assert build_syntax_lines(model) == [
        f"Get-Widget [-Path] <String> [[-Count] <Int32>] [-Force] {COMMON_PARAMETERS_MARKER}",
        f"Get-Widget [-Path] <String> {COMMON_PARAMETERS_MARKER}",
    ]


def test_model_without_parameter_sets_uses_all_parameters() -> None:
    model = HelpModel(name="Invoke", parameters=[Parameter(name="Id", type="Int32", mandatory=True)])
    assert build_syntax_lines(model) == ["Invoke -Id <Int32>"]
