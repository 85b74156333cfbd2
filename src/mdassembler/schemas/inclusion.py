"""Inclusion stack frame model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Inclusion(BaseModel):
    """One frame of the inclusion stack.

    The root frame of an expansion has no directive; every other frame
    records the include directive that opened it.

    Attributes:
        template_file_path: Absolute path of the file being read.
        markdown_file_path: Path of the file being written, if any.
        line_number: 1-based line of the directive in ``template_file_path``.
        directive: Literal directive text, trailing whitespace removed.
        includee_file_path: Absolute path the directive resolved to.
    """

    model_config = ConfigDict(frozen=True)

    template_file_path: Path
    markdown_file_path: Path | None = None
    line_number: int | None = None
    directive: str | None = None
    includee_file_path: Path | None = None

    @property
    def is_directive(self) -> bool:
        return self.directive is not None
