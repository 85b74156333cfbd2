"""Custom exceptions for mdassembler."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdassembler.schemas import Inclusion


class MarkdownAssemblerError(Exception):
    """Base exception for mdassembler operations."""


class OptionError(MarkdownAssemblerError):
    """Unrecognized engine option."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown option: {name}")


class OptionValueError(MarkdownAssemblerError):
    """Recognized engine option given a value of the wrong type."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for option {name}: {value!r}")


class AssemblerIOError(MarkdownAssemblerError):
    """Error opening a template, includee, or output file."""


class UnreadableTemplateError(AssemblerIOError):
    """Top-level template could not be opened for reading."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not read template file:\n{path.as_posix()}\n")


class UnwritableMarkdownError(AssemblerIOError):
    """Output markdown file could not be opened for writing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not write markdown file:\n{path.as_posix()}\n")


class _BacktraceError(MarkdownAssemblerError):
    """Error raised inside an inclusion, reported with its backtrace."""

    summary = ""

    def __init__(
        self,
        path: str,
        backtrace: str,
        inclusions: tuple[Inclusion, ...] = (),
    ) -> None:
        self.path = path
        self.inclusions = inclusions
        super().__init__(f"{self.summary}: {path}\n{backtrace}")


class UnreadableIncludeeError(_BacktraceError, AssemblerIOError):
    """A file cited by an include directive could not be opened."""

    summary = "Could not read includee file"


class CircularIncludeError(_BacktraceError):
    """A markdown includee is already being expanded further up the stack."""

    summary = "Circular inclusion"


class PageTocError(MarkdownAssemblerError):
    """Error placing or building the page table of contents."""


class InvalidTocTitleError(PageTocError):
    """Page TOC title is not a markdown heading."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"TOC title must be a valid markdown header, not {title}")


class MultiplePageTocError(PageTocError):
    """More than one page TOC directive in the document."""

    def __init__(self) -> None:
        super().__init__("Only one page TOC allowed.")


class MisplacedPageTocError(PageTocError):
    """Page TOC directive reached through an included markdown file."""

    def __init__(self) -> None:
        super().__init__("Page TOC must be in outermost markdown file.")
