"""Build the page table of contents from an expanded document."""

from __future__ import annotations

from mdassembler.document import ExpandedDocument, ExpandedLine
from mdassembler.exceptions import (
    InvalidTocTitleError,
    MisplacedPageTocError,
    MultiplePageTocError,
)
from mdassembler.headings import iter_headings, parse_heading
from mdassembler.schemas import Heading

_INDENT = "  "


def synthesize(document: ExpandedDocument) -> str:
    """Replace the page TOC marker, if any, with a list of heading links.

    Validation order: more than one marker, then an invalid title, then a
    marker that came from an included file.

    Raises:
        MultiplePageTocError: If the document holds two or more markers.
        InvalidTocTitleError: If the marker's title is not a heading.
        MisplacedPageTocError: If the marker is not in the top-level template.
    """
    markers = document.markers()
    if not markers:
        return document.text()
    if len(markers) > 1:
        raise MultiplePageTocError()

    marker = markers[0]
    title = parse_heading(marker.toc_title or "")
    if title is None:
        raise InvalidTocTitleError(marker.toc_title or "")
    if marker.depth != 0:
        raise MisplacedPageTocError()

    headings = list(iter_headings(line.text for line in document.lines if not line.is_toc_marker))
    toc = render_toc(marker, headings)
    return "".join(toc if line is marker else line.text for line in document.lines)


def render_toc(marker: ExpandedLine, headings: list[Heading]) -> str:
    """Render the TOC title and one list item per heading.

    Items are indented two spaces per level below the shallowest heading.
    """
    newline = "\r\n" if marker.text.endswith("\r\n") else "\n"
    lines = [(marker.toc_title or "").strip()]
    if headings:
        top_level = min(heading.level for heading in headings)
        for heading in headings:
            indent = _INDENT * (heading.level - top_level)
            lines.append(f"{indent}- {heading.link}")
    return newline.join(lines) + newline
