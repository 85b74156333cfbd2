"""Tests for the inclusion stack."""

from __future__ import annotations

from pathlib import Path

from mdassembler.inclusions import InclusionStack
from mdassembler.schemas import Inclusion


def _directive_frame(root: Path, template: str, line: int, directive: str, includee: str) -> Inclusion:
    return Inclusion(
        template_file_path=root / template,
        line_number=line,
        directive=directive,
        includee_file_path=root / includee,
    )


class TestInclusionStack:
    """Tests for push/pop/find."""

    def test_push_and_pop(self, tmp_path: Path) -> None:
        stack = InclusionStack()
        top = Inclusion(template_file_path=tmp_path / "main.md", markdown_file_path=tmp_path / "out.md")
        stack.push(top)

        assert len(stack) == 1
        assert stack.pop() == top
        assert len(stack) == 0

    def test_find_matches_template_path(self, tmp_path: Path) -> None:
        stack = InclusionStack()
        stack.push(Inclusion(template_file_path=tmp_path / "main.md"))
        stack.push(_directive_frame(tmp_path, "main.md", 1, "@[markdown](a.md)", "a.md"))

        assert stack.find(tmp_path / "main.md") is not None
        assert stack.find(tmp_path / "a.md") is None


class TestFormatBacktrace:
    """Tests for backtrace rendering."""

    def test_innermost_first_and_root_frame_hidden(self, tmp_path: Path) -> None:
        stack = InclusionStack()
        stack.push(Inclusion(template_file_path=tmp_path / "main.md"))
        stack.push(_directive_frame(tmp_path, "main.md", 3, "@[markdown](a.md)", "a.md"))
        stack.push(_directive_frame(tmp_path, "a.md", 7, "@[markdown](b.md)", "b.md"))

        expected = (
            "Inclusion backtrace, innermost first:\n"
            "Level 1:\n"
            "  Site: a.md:7\n"
            "  Directive: @[markdown](b.md)\n"
            "Level 0:\n"
            "  Site: main.md:3\n"
            "  Directive: @[markdown](a.md)\n"
        )
        assert stack.format_backtrace(tmp_path) == expected

    def test_paths_outside_root_are_absolute(self, tmp_path: Path) -> None:
        stack = InclusionStack()
        stack.push(_directive_frame(tmp_path, "main.md", 1, "@[pre](x.txt)", "x.txt"))

        backtrace = stack.format_backtrace(tmp_path / "elsewhere")

        assert f"  Site: {(tmp_path / 'main.md').as_posix()}:1\n" in backtrace
