"""In-memory output stream shared by nested expansions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExpandedLine:
    """One output line and the inclusion depth it came from.

    Attributes:
        text: Line content including its line ending, if any.
        depth: 0 for the top-level template, +1 per ``markdown`` inclusion.
        toc_title: Set when the line is a page TOC marker.
    """

    text: str
    depth: int = 0
    toc_title: str | None = None

    @property
    def is_toc_marker(self) -> bool:
        return self.toc_title is not None

    @property
    def is_blank(self) -> bool:
        return not self.is_toc_marker and not self.text.strip()


class ExpandedDocument:
    """Collects expanded lines, applying the pristine seam policy.

    With ``pristine`` set, blank lines are suppressed only where an
    inclusion meets its host: leading blanks of included content that
    follow a blank line, a trailing blank run inside the included content
    beyond the first blank, and host blank lines right after the inclusion
    that would repeat a blank line. Non-blank lines are never altered, so a
    document without directives passes through unchanged.
    """

    def __init__(self, *, pristine: bool = False) -> None:
        self.pristine = pristine
        self.lines: list[ExpandedLine] = []
        self._after_inclusion = False

    def write(self, text: str, depth: int = 0) -> None:
        line = ExpandedLine(text=text, depth=depth)
        if self._after_inclusion:
            if line.is_blank and self._ends_blank():
                return
            if not line.is_blank:
                self._after_inclusion = False
        self.lines.append(line)

    def write_toc_marker(self, text: str, title: str, depth: int) -> None:
        self._after_inclusion = False
        self.lines.append(ExpandedLine(text=text, depth=depth, toc_title=title))

    def begin_inclusion(self) -> int:
        """Mark where an inclusion's content starts."""
        return len(self.lines)

    def end_inclusion(self, start: int) -> None:
        """Normalize the seams of the inclusion that began at ``start``."""
        if not self.pristine:
            return
        if start == 0 or self.lines[start - 1].is_blank:
            while start < len(self.lines) and self.lines[start].is_blank:
                del self.lines[start]
        while (
            len(self.lines) - start >= 2
            and self.lines[-1].is_blank
            and self.lines[-2].is_blank
        ):
            self.lines.pop()
        self._after_inclusion = True

    def markers(self) -> list[ExpandedLine]:
        return [line for line in self.lines if line.is_toc_marker]

    def text(self) -> str:
        return "".join(line.text for line in self.lines)

    def _ends_blank(self) -> bool:
        return not self.lines or self.lines[-1].is_blank
