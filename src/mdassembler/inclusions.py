"""Inclusion stack used for cycle detection and error backtraces."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from mdassembler.paths import display_path
from mdassembler.schemas import Inclusion


class InclusionStack:
    """Active inclusion frames for a single expansion, innermost last."""

    def __init__(self) -> None:
        self._frames: list[Inclusion] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Inclusion]:
        return iter(self._frames)

    @property
    def frames(self) -> tuple[Inclusion, ...]:
        return tuple(self._frames)

    def push(self, inclusion: Inclusion) -> None:
        self._frames.append(inclusion)

    def pop(self) -> Inclusion:
        return self._frames.pop()

    def find(self, template_file_path: Path) -> Inclusion | None:
        """Return the outermost frame reading ``template_file_path``, if any."""
        for inclusion in self._frames:
            if inclusion.template_file_path == template_file_path:
                return inclusion
        return None

    def format_backtrace(self, root: Path | None = None) -> str:
        """Render the directive frames, innermost first.

        Frames without a directive (the top-level template) are not shown;
        levels count directive frames from the outermost one, starting at 0.
        """
        directives = [inclusion for inclusion in self._frames if inclusion.is_directive]
        lines = ["Inclusion backtrace, innermost first:"]
        for level in range(len(directives) - 1, -1, -1):
            inclusion = directives[level]
            site = display_path(inclusion.template_file_path, root)
            lines.append(f"Level {level}:")
            lines.append(f"  Site: {site}:{inclusion.line_number}")
            lines.append(f"  Directive: {inclusion.directive}")
        return "\n".join(lines) + "\n"
