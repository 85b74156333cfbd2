"""mdassembler: assemble markdown documents from included fragments."""

from mdassembler.assembler import MarkdownAssembler
from mdassembler.directives import Directive, Treatment, parse_directive
from mdassembler.exceptions import (
    AssemblerIOError,
    CircularIncludeError,
    InvalidTocTitleError,
    MarkdownAssemblerError,
    MisplacedPageTocError,
    MultiplePageTocError,
    OptionError,
    OptionValueError,
    PageTocError,
    UnreadableIncludeeError,
    UnreadableTemplateError,
    UnwritableMarkdownError,
)
from mdassembler.headings import parse_heading
from mdassembler.schemas import AssemblerOptions, Heading, Inclusion

__version__ = "0.1.0"

__all__ = [
    "AssemblerIOError",
    "AssemblerOptions",
    "CircularIncludeError",
    "Directive",
    "Heading",
    "Inclusion",
    "InvalidTocTitleError",
    "MarkdownAssembler",
    "MarkdownAssemblerError",
    "MisplacedPageTocError",
    "MultiplePageTocError",
    "OptionError",
    "OptionValueError",
    "PageTocError",
    "Treatment",
    "UnreadableIncludeeError",
    "UnreadableTemplateError",
    "UnwritableMarkdownError",
    "parse_directive",
    "parse_heading",
]
