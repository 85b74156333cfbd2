"""Parse include directives of the form ``@[treatment](target)``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_DIRECTIVE_RE = re.compile(r"^@\[(?P<treatment>:?[\w.+#-]+)\]\((?P<target>.*)\)$")


class Treatment(str, Enum):
    """How an includee's content is rendered into the output."""

    MARKDOWN = "markdown"
    CODE_BLOCK = "code_block"
    COMMENT = "comment"
    PRE = "pre"
    PAGE_TOC = "page_toc"
    LANGUAGE = "language"


_KEYWORDS = {
    treatment.value: treatment
    for treatment in Treatment
    if treatment is not Treatment.LANGUAGE
}


@dataclass(frozen=True)
class Directive:
    """A single include directive.

    Attributes:
        treatment: Rendering strategy for the includee.
        target: Cited path, or the TOC title for ``page_toc``.
        text: The directive as written, trailing whitespace removed.
        language: Fence language tag, set only for ``Treatment.LANGUAGE``.
    """

    treatment: Treatment
    target: str
    text: str
    language: str | None = None

    @property
    def is_recursive(self) -> bool:
        return self.treatment is Treatment.MARKDOWN

    @property
    def cites_file(self) -> bool:
        return self.treatment is not Treatment.PAGE_TOC


def parse_directive(line: str) -> Directive | None:
    """Parse ``line`` as an include directive.

    The directive must begin at the start of the line and make up the whole
    line apart from trailing whitespace. A leading colon on the treatment
    (``@[:markdown](...)``) is accepted. Any treatment that is not a keyword
    is taken as a code fence language tag. An empty target is allowed only
    for ``page_toc``, whose title is then rejected when the TOC is built.

    Returns:
        The parsed directive, or None if the line is ordinary content.
    """
    text = line.rstrip()
    match = _DIRECTIVE_RE.match(text)
    if not match:
        return None

    name = match.group("treatment").lstrip(":")
    target = match.group("target")
    treatment = _KEYWORDS.get(name)
    if not target and treatment is not Treatment.PAGE_TOC:
        return None
    if treatment is None:
        return Directive(treatment=Treatment.LANGUAGE, target=target, text=text, language=name)
    return Directive(treatment=treatment, target=target, text=text)
