"""Recursive expansion of include directives."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from mdassembler.config import MDASSEMBLER_ENCODING
from mdassembler.directives import Directive, Treatment, parse_directive
from mdassembler.document import ExpandedDocument
from mdassembler.exceptions import (
    CircularIncludeError,
    UnreadableIncludeeError,
    UnreadableTemplateError,
)
from mdassembler.inclusions import InclusionStack
from mdassembler.paths import absolute_path, display_path, resolve_includee_path
from mdassembler.schemas import Inclusion
from mdassembler.utils.logging_config import get_logger

logger = get_logger(__name__)

_FENCE = "```"


class IncludeExpander:
    """Expand include directives from a template into an ExpandedDocument.

    Each call to :meth:`expand` owns a fresh :class:`InclusionStack`, so one
    expander may be reused for several templates in sequence.

    Args:
        root: Directory that includee paths in error messages are shown
            relative to. None shows absolute paths.
        resolve_includes: If False, only ``page_toc`` directives are acted
            on; every other directive line is copied through unchanged.
        encoding: Text encoding for templates and includees.
    """

    def __init__(
        self,
        *,
        root: Path | None = None,
        resolve_includes: bool = True,
        encoding: str = MDASSEMBLER_ENCODING,
    ) -> None:
        self.root = root
        self.resolve_includes = resolve_includes
        self.encoding = encoding

    def expand(
        self,
        template_path: str | Path,
        document: ExpandedDocument,
        *,
        markdown_path: str | Path | None = None,
    ) -> ExpandedDocument:
        """Expand ``template_path`` into ``document``.

        Raises:
            UnreadableTemplateError: If the template cannot be opened or
                decoded.
            UnreadableIncludeeError: If a cited file cannot be opened or
                decoded.
            CircularIncludeError: If a markdown includee is already being
                expanded further up the stack.
        """
        template = absolute_path(template_path)
        stack = InclusionStack()
        stack.push(
            Inclusion(
                template_file_path=template,
                markdown_file_path=absolute_path(markdown_path) if markdown_path else None,
            )
        )
        try:
            handle = template.open("r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise UnreadableTemplateError(template) from exc
        with handle:
            try:
                self._expand_lines(handle, template, document, stack, depth=0)
            except UnicodeDecodeError as exc:
                raise UnreadableTemplateError(template) from exc
        stack.pop()
        return document

    def _expand_lines(
        self,
        handle: TextIO,
        template: Path,
        document: ExpandedDocument,
        stack: InclusionStack,
        *,
        depth: int,
    ) -> None:
        for line_number, line in enumerate(handle, start=1):
            if depth > 0 and not line.endswith(("\n", "\r")):
                line += "\n"
            directive = parse_directive(line)
            if directive is None or not self._acts_on(directive):
                document.write(line, depth)
                continue
            if directive.treatment is Treatment.PAGE_TOC:
                document.write_toc_marker(line, directive.target, depth)
                continue
            self._include(directive, template, line_number, document, stack, depth=depth)

    def _acts_on(self, directive: Directive) -> bool:
        return self.resolve_includes or directive.treatment is Treatment.PAGE_TOC

    def _include(
        self,
        directive: Directive,
        template: Path,
        line_number: int,
        document: ExpandedDocument,
        stack: InclusionStack,
        *,
        depth: int,
    ) -> None:
        includee = resolve_includee_path(template, directive.target)
        stack.push(
            Inclusion(
                template_file_path=template,
                line_number=line_number,
                directive=directive.text,
                includee_file_path=includee,
            )
        )
        if directive.is_recursive and stack.find(includee) is not None:
            raise CircularIncludeError(
                display_path(includee, self.root),
                stack.format_backtrace(self.root),
                stack.frames,
            )
        try:
            handle = includee.open("r", encoding=self.encoding, newline="")
        except OSError as exc:
            raise self._unreadable_includee(includee, stack) from exc

        logger.debug("Including %s as %s", includee, directive.treatment.value)
        start = document.begin_inclusion()
        with handle:
            try:
                if directive.is_recursive:
                    self._expand_lines(handle, includee, document, stack, depth=depth + 1)
                else:
                    for text in _render_verbatim(directive, handle.read()):
                        document.write(text, depth)
            except UnicodeDecodeError as exc:
                raise self._unreadable_includee(includee, stack) from exc
        document.end_inclusion(start)
        stack.pop()
        logger.debug("Finished including %s", includee)

    def _unreadable_includee(self, includee: Path, stack: InclusionStack) -> UnreadableIncludeeError:
        return UnreadableIncludeeError(
            display_path(includee, self.root),
            stack.format_backtrace(self.root),
            stack.frames,
        )


def _render_verbatim(directive: Directive, content: str) -> list[str]:
    """Wrap raw includee content for a non-recursive treatment."""
    if content and not content.endswith(("\n", "\r")):
        content += "\n"
    body = content.splitlines(keepends=True)

    if directive.treatment is Treatment.CODE_BLOCK:
        return [f"{_FENCE}\n", *body, f"{_FENCE}\n"]
    if directive.treatment is Treatment.LANGUAGE:
        return [f"{_FENCE}{directive.language}\n", *body, f"{_FENCE}\n"]
    if directive.treatment is Treatment.COMMENT:
        return ["<!--\n", *body, "-->\n"]
    if directive.treatment is Treatment.PRE:
        return ["<pre>\n", *body, "</pre>\n"]
    raise ValueError(f"Treatment {directive.treatment.value} does not render verbatim")
