from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from helpdoc.models import Example, HelpModel, Parameter, RelatedLink

WIDGET_YAML = """\
# Deployment settings for the widget service.
#
# .SYNOPSIS
# Configures the widget service.
#
# .DESCRIPTION
# Values in this file control how widgets
# are rendered.
#
#     widgets:
#       size: 3
#
# .EXAMPLE
#     helpdoc render --path widget.yml
#
# Renders this file as Markdown.
#
# .NOTES
# Reviewed quarterly.
# ----
# Owned by the platform team.
#
# .LINK
# Project Site: https://example.com/docs
# https://example.com
# See the user guide
#
# .COMPONENT
# Widgets
# .FUNCTIONALITY
# Configuration
# .ROLE
# Operator
widgets:
  size: 3
"""


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write dedented content to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def widget_yaml(write_file: Callable[[str, str], Path]) -> Path:
    return write_file("widget.yml", WIDGET_YAML)


@pytest.fixture
def widget_model() -> HelpModel:
    """A callable help model with every section populated."""
    path = Parameter(name="Path", type="String", position=0, mandatory=True, accepts_pipeline_input=True)
    count = Parameter(name="Count", type="Int32", position=1, default_value="1")
    force = Parameter(name="Force", type="Switch", aliases=["f"])
    model = HelpModel(
        name="Get-Widget",
        synopsis="Gets widgets.",
        description=["Retrieves widgets from the store.", "    Get-Widget -Path ./w"],
        examples=[
            Example(code=["Get-Widget -Path a"], remarks="Gets widget a."),
            Example(code=["Get-Widget -Path b -Force"], remarks="Forces b."),
        ],
        parameters=[force, count, path],
        parameter_sets=[[path, count, force]],
        input_types=["String"],
        output_types=["Widget", "str"],
        notes=["Requires a store."],
        related_links=[RelatedLink(label_text="https://example.com/widgets")],
        accepts_common_parameters=True,
    )
    return model.finalize()


@pytest.fixture
def widget_yaml_text() -> str:
    return WIDGET_YAML
