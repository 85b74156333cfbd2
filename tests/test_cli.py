"""Tests for the command-line front end."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from mdassembler.cli import main

WriteFile = Callable[[str, str], Path]
ReadFile = Callable[[str], str]


def test_include_success(write_file: WriteFile, read_file: ReadFile, tmp_path: Path) -> None:
    write_file("inc.md", "\nIncluded\n")
    template = write_file("main.md", "Top\n\n@[markdown](inc.md)\n")

    status = main(["include", "--pristine", str(template), str(tmp_path / "out.md")])

    assert status == 0
    assert read_file("out.md") == "Top\n\nIncluded\n"


def test_create_page_toc(write_file: WriteFile, read_file: ReadFile, tmp_path: Path) -> None:
    template = write_file("main.md", "@[page_toc](# Contents)\n## One\n")

    status = main(["create_page_toc", str(template), str(tmp_path / "out.md")])

    assert status == 0
    assert read_file("out.md") == "# Contents\n- [One](#one)\n## One\n"


def test_error_goes_to_stderr(
    write_file: WriteFile, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    template = write_file("main.md", "@[:page_toc](No hashes)\n")

    status = main(["include", str(template), str(tmp_path / "out.md")])

    assert status == 1
    assert capsys.readouterr().err == "TOC title must be a valid markdown header, not No hashes\n"


def test_missing_command_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
    assert "usage: mdassembler" in capsys.readouterr().err


def test_undecodable_includee_exits_with_error(
    write_file: WriteFile, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "logo.txt").write_bytes(b"caf\xe9\n")
    template = write_file("main.md", "@[code_block](logo.txt)\n")

    status = main(["include", str(template), str(tmp_path / "out.md")])

    assert status == 1
    assert capsys.readouterr().err.startswith("Could not read includee file: ")
    assert not (tmp_path / "out.md").exists()
