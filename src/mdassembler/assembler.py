"""Engine facade: expand includes, then build the page TOC."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from mdassembler.config import MDASSEMBLER_ENCODING
from mdassembler.document import ExpandedDocument
from mdassembler.exceptions import (
    OptionError,
    OptionValueError,
    UnreadableTemplateError,
    UnwritableMarkdownError,
)
from mdassembler.expander import IncludeExpander
from mdassembler.page_toc import synthesize
from mdassembler.paths import absolute_path
from mdassembler.schemas import AssemblerOptions
from mdassembler.utils.logging_config import get_logger

logger = get_logger(__name__)


class MarkdownAssembler:
    """Assemble markdown documents from templates with include directives.

    Options are checked when the assembler is built, before any file is
    touched. They stay mutable, so one instance can be reused with
    different settings between calls.

    Args:
        options: Mapping of option name to value. The only recognized
            option is ``pristine``.
        root: Directory that includee paths in error messages are shown
            relative to. Defaults to the working directory at call time.
        encoding: Text encoding for every file read or written.

    Raises:
        OptionError: If ``options`` contains an unrecognized name.
        OptionValueError: If an option value has the wrong type.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        root: str | os.PathLike[str] | None = None,
        encoding: str = MDASSEMBLER_ENCODING,
    ) -> None:
        options = dict(options or {})
        for name in options:
            if name not in AssemblerOptions.model_fields:
                raise OptionError(str(name))
        try:
            self.options = AssemblerOptions(**options)
        except ValidationError as exc:
            name = str(exc.errors()[0]["loc"][0])
            raise OptionValueError(name, options[name]) from exc
        self.root = absolute_path(root) if root is not None else None
        self.encoding = encoding

    @property
    def pristine(self) -> bool:
        return self.options.pristine

    @pristine.setter
    def pristine(self, value: bool) -> None:
        try:
            self.options.pristine = value
        except ValidationError as exc:
            raise OptionValueError("pristine", value) from exc

    def include(self, template_path: str | os.PathLike[str], markdown_path: str | os.PathLike[str]) -> None:
        """Expand every include directive in a template and write the result.

        A ``page_toc`` directive in the top-level template is replaced by
        a list of links to every heading of the expanded document.

        Args:
            template_path: Template to expand.
            markdown_path: Output file. It is replaced only after the whole
                document has been assembled.

        Raises:
            MarkdownAssemblerError: Any of its subclasses, if the template,
                an includee, or the output cannot be processed.
        """
        self._assemble(template_path, markdown_path, resolve_includes=True)

    def create_page_toc(self, template_path: str | os.PathLike[str], markdown_path: str | os.PathLike[str]) -> None:
        """Build the page TOC for a template without expanding includes.

        Include directives other than ``page_toc`` are copied verbatim.
        """
        self._assemble(template_path, markdown_path, resolve_includes=False)

    def _assemble(
        self,
        template_path: str | os.PathLike[str],
        markdown_path: str | os.PathLike[str],
        *,
        resolve_includes: bool,
    ) -> None:
        template = absolute_path(template_path)
        markdown = absolute_path(markdown_path)
        if not template.is_file() or not os.access(template, os.R_OK):
            raise UnreadableTemplateError(template)
        if not _is_writable(markdown):
            raise UnwritableMarkdownError(markdown)

        expander = IncludeExpander(
            root=self.root or Path.cwd(),
            resolve_includes=resolve_includes,
            encoding=self.encoding,
        )
        document = expander.expand(
            template,
            ExpandedDocument(pristine=self.pristine),
            markdown_path=markdown,
        )
        text = synthesize(document)

        # The output may be the template itself, so it is opened only after expansion.
        try:
            output = markdown.open("w", encoding=self.encoding, newline="")
        except OSError as exc:
            raise UnwritableMarkdownError(markdown) from exc
        with output:
            output.write(text)
        logger.info("Assembled %s from %s", markdown, template)


def _is_writable(path: Path) -> bool:
    """Check that ``path`` could be opened for writing, without touching it."""
    if path.exists():
        return path.is_file() and os.access(path, os.W_OK)
    return path.parent.is_dir() and os.access(path.parent, os.W_OK)
