"""Tests for helpdoc.models."""

from __future__ import annotations

import pytest

from helpdoc.models import KIND_COMMENT, HelpModel, Parameter, RelatedLink, unique_ordered


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_names_are_rejected(name: str) -> None:
    with pytest.raises(ValueError, match="name"):
        HelpModel(name=name).finalize()


def test_finalize_strips_name_and_returns_model() -> None:
    model = HelpModel(name="  Get-Widget  ")
    assert model.finalize() is model
    assert model.name == "Get-Widget"


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError, match="kind"):
        HelpModel(name="thing", kind="script").finalize()


def test_parameter_sets_must_reference_known_parameters() -> None:
    path = Parameter(name="Path", position=0)
    stray = Parameter(name="Stray")
    model = HelpModel(name="Get-Widget", parameters=[path], parameter_sets=[[path, stray]])

    with pytest.raises(ValueError, match="Stray"):
        model.finalize()


def test_related_link_requires_label_or_uri() -> None:
    with pytest.raises(ValueError):
        RelatedLink()
    with pytest.raises(ValueError):
        RelatedLink(label_text="", uri="")
    assert RelatedLink(uri="https://example.com").label_text is None


def test_type_lists_are_deduplicated_in_first_appearance_order() -> None:
    model = HelpModel(
        name="Get-Widget",
        input_types=["String", "Int32", "String", "Widget", "Int32"],
        output_types=["Widget", "Widget", "String"],
    ).finalize()

    assert model.input_types == ["String", "Int32", "Widget"]
    assert model.output_types == ["Widget", "String"]


def test_unique_ordered_keeps_first_occurrence() -> None:
    assert unique_ordered(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_sorted_parameters_put_named_last() -> None:
    named = Parameter(name="Force", type="Switch")
    second = Parameter(name="Count", position=1)
    first = Parameter(name="Path", position=0)
    model = HelpModel(name="Get-Widget", kind=KIND_COMMENT, parameters=[named, second, first])

    assert [param.name for param in model.sorted_parameters()] == ["Path", "Count", "Force"]
    assert named.is_switch
