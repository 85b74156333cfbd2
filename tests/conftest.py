"""Test setup for mdassembler."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``content`` to ``relative`` under tmp_path, creating directories."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def read_file(tmp_path: Path) -> Callable[[str], str]:
    """Read a file under tmp_path without newline translation."""

    def _read(relative: str) -> str:
        return (tmp_path / relative).read_bytes().decode("utf-8")

    return _read
