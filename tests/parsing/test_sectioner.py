"""Tests for comment-block sectioning."""

from __future__ import annotations

import pytest

from helpdoc.errors import MalformedBlockError
from helpdoc.models import KIND_COMMENT
from helpdoc.parsing import (
    KEYWORD_ORDER,
    CommentBlockSectioner,
    Keyword,
    KeywordToken,
    build_help_model,
    extract_comment_block,
)
from helpdoc.parsing.sectioner import reflow


def test_keyword_lexicon_is_closed_and_ordered() -> None:
    assert [keyword.value for keyword in KEYWORD_ORDER] == [
        "SYNOPSIS",
        "DESCRIPTION",
        "EXAMPLE",
        "NOTES",
        "LINK",
        "COMPONENT",
        "FUNCTIONALITY",
        "ROLE",
    ]
    assert Keyword.NOTES.ordinal == 3
    assert Keyword.lookup("parameter") is None


def test_tokenize_reports_keyword_line_indexes() -> None:
    lines = ["# intro", "# .SYNOPSIS", "# text", "#   description", "# .example"]
    tokens = CommentBlockSectioner("#").tokenize(lines)
    assert tokens == [
        KeywordToken(Keyword.SYNOPSIS, 1),
        KeywordToken(Keyword.DESCRIPTION, 3),
        KeywordToken(Keyword.EXAMPLE, 4),
    ]


def test_keyword_must_fill_the_whole_line() -> None:
    sectioner = CommentBlockSectioner("#")
    assert sectioner.match_keyword("# Synopsis of the tool") is None
    assert sectioner.match_keyword("#.NOTES") is Keyword.NOTES
    assert sectioner.match_keyword("  #   Role  ") is Keyword.ROLE


def test_text_before_first_keyword_is_discarded() -> None:
    model = build_help_model("# Preamble text\n# .SYNOPSIS\n# Short.", name="thing")
    assert model.synopsis == "Short."
    assert model.description == []
    assert model.kind == KIND_COMMENT


def test_block_without_keywords_is_malformed() -> None:
    with pytest.raises(MalformedBlockError):
        build_help_model("# just a comment\n# and another", name="thing")


def test_repeated_singleton_keyword_keeps_first_occurrence() -> None:
    text = "# .DESCRIPTION\n# First.\n# .DESCRIPTION\n# Second."
    model = build_help_model(text, name="thing")
    assert model.description == ["First."]


def test_example_keyword_recurs_in_order() -> None:
    text = (
        "# .EXAMPLE\n"
        "#     run one\n"
        "# First remark.\n"
        "# .EXAMPLE\n"
        "#     run two\n"
        "#     --flag\n"
    )
    model = build_help_model(text, name="thing")
    assert [example.code for example in model.examples] == [["run one"], ["run two", "--flag"]]
    assert model.examples[0].remarks == "First remark."
    assert model.examples[1].remarks is None


def test_example_without_verbatim_lines_uses_first_line_as_code() -> None:
    model = build_help_model("# .EXAMPLE\n# run it\n# Explains\n# the run.", name="thing")
    assert model.examples[0].code == ["run it"]
    assert model.examples[0].remarks == "Explains the run."


def test_narrative_lines_are_reflowed_and_verbatim_lines_kept() -> None:
    lines = ["First line", "continues here.", "", "Second paragraph.", "    code()", "", "    more()"]
    assert reflow(lines) == [
        "First line continues here.",
        "Second paragraph.",
        "    code()",
        "",
        "    more()",
    ]


def test_notes_keep_rule_markers() -> None:
    text = "# .NOTES\n# Above.\n# =====\n# Below.\n# .LINK\n# https://example.com"
    model = build_help_model(text, name="thing")
    assert model.notes == ["Above.", "=====", "Below."]


def test_rule_lines_outside_notes_are_narrative() -> None:
    model = build_help_model("# .DESCRIPTION\n# Above.\n# ----", name="thing")
    assert model.description == ["Above. ----"]


def test_full_yaml_block_populates_every_field(widget_yaml_text: str) -> None:
    block = extract_comment_block(widget_yaml_text)
    model = CommentBlockSectioner("#").parse(block, name="widget.yml")

    assert model.synopsis == "Configures the widget service."
    assert model.description == [
        "Values in this file control how widgets are rendered.",
        "    widgets:",
        "      size: 3",
    ]
    assert len(model.examples) == 1
    assert model.examples[0].code == ["helpdoc render --path widget.yml"]
    assert model.examples[0].remarks == "Renders this file as Markdown."
    assert model.notes == ["Reviewed quarterly.", "----", "Owned by the platform team."]
    assert [link.label_text for link in model.related_links] == [
        "Project Site: https://example.com/docs",
        "https://example.com",
        "See the user guide",
    ]
    assert (model.component, model.functionality, model.role) == (
        "Widgets",
        "Configuration",
        "Operator",
    )


def test_extract_comment_block_prefers_run_with_keywords() -> None:
    text = (
        "# yaml-language-server: $schema=x.json\n"
        "name: demo\n"
        "# .SYNOPSIS\n"
        "# Demo settings.\n"
        "\n"
        "values: []\n"
    )
    assert extract_comment_block(text) == "# .SYNOPSIS\n# Demo settings."


def test_extract_comment_block_without_comments_is_empty() -> None:
    assert extract_comment_block("name: demo\n") == ""


def test_sectioner_without_marker_reads_docstrings() -> None:
    doc = ".SYNOPSIS\nDocstring help.\n\n.NOTES\nNothing else."
    model = CommentBlockSectioner(comment_marker=None).parse(doc, name="func")
    assert model.synopsis == "Docstring help."
    assert model.notes == ["Nothing else."]
