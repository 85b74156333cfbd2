"""Tests for include directive parsing."""

from __future__ import annotations

import pytest

from mdassembler.directives import Treatment, parse_directive


@pytest.mark.parametrize(
    ("line", "treatment"),
    [
        ("@[markdown](a.md)", Treatment.MARKDOWN),
        ("@[:markdown](a.md)", Treatment.MARKDOWN),
        ("@[code_block](a.py)", Treatment.CODE_BLOCK),
        ("@[:code_block](a.py)", Treatment.CODE_BLOCK),
        ("@[comment](a.txt)", Treatment.COMMENT),
        ("@[:pre](a.txt)", Treatment.PRE),
        ("@[:page_toc](## Contents)", Treatment.PAGE_TOC),
    ],
)
def test_parses_keyword_treatments(line: str, treatment: Treatment) -> None:
    directive = parse_directive(line)

    assert directive is not None
    assert directive.treatment is treatment
    assert directive.language is None


def test_unknown_treatment_is_language_tag() -> None:
    directive = parse_directive("@[python](../includes/python.py)\n")

    assert directive is not None
    assert directive.treatment is Treatment.LANGUAGE
    assert directive.language == "python"
    assert directive.target == "../includes/python.py"


def test_page_toc_target_is_title() -> None:
    directive = parse_directive("@[:page_toc](## Table of (Most) Contents)")

    assert directive is not None
    assert directive.target == "## Table of (Most) Contents"
    assert not directive.cites_file


def test_text_keeps_directive_without_trailing_whitespace() -> None:
    directive = parse_directive("@[:markdown](a.md)  \r\n")

    assert directive is not None
    assert directive.text == "@[:markdown](a.md)"
    assert directive.is_recursive


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Some text",
        " @[markdown](a.md)",
        "see @[markdown](a.md)",
        "@[markdown](a.md) trailing",
        "@[markdown]()",
        "@[](a.md)",
        "@[two words](a.md)",
    ],
)
def test_rejects_non_directives(line: str) -> None:
    assert parse_directive(line) is None


def test_page_toc_accepts_empty_title() -> None:
    directive = parse_directive("@[page_toc]()\n")

    assert directive is not None
    assert directive.treatment is Treatment.PAGE_TOC
    assert directive.target == ""


@pytest.mark.parametrize("line", ["@[code_block]()", "@[python]()", "@[:pre]()"])
def test_file_treatments_need_a_path(line: str) -> None:
    assert parse_directive(line) is None
