"""Path helpers for include resolution and diagnostics."""

from __future__ import annotations

import os
from pathlib import Path


def absolute_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` made absolute and normalized, without following symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


def resolve_includee_path(includer_path: Path, cited_path: str) -> Path:
    """Resolve a directive's path against the directory of the file citing it.

    Args:
        includer_path: Absolute path of the template holding the directive.
        cited_path: Path exactly as written in the directive.

    Returns:
        Absolute, normalized path of the includee.
    """
    return Path(os.path.normpath(includer_path.parent / cited_path))


def display_path(path: Path, root: Path | None) -> str:
    """Render ``path`` relative to ``root`` when it lies beneath it."""
    if root is not None and path.is_relative_to(root):
        return path.relative_to(root).as_posix()
    return path.as_posix()
