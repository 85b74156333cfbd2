"""Recognize ATX headings and render links to them."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from mdassembler.schemas import Heading

# Up to three spaces of indentation; four or more makes an indented code block.
_HEADING_RE = re.compile(r"^ {0,3}(?P<hashes>#{1,6}) +(?P<text>.*?)(?: +#+)? *$")


def parse_heading(line: str) -> Heading | None:
    """Parse one line as an ATX heading.

    A closing hash sequence is dropped only when whitespace separates it
    from the title, so ``# Foo#`` keeps ``Foo#`` as its text.

    Args:
        line: A single line, with or without its line ending.

    Returns:
        The parsed heading, or None if the line is not a heading.
    """
    match = _HEADING_RE.match(line.rstrip("\r\n"))
    if not match:
        return None
    text = match.group("text").strip()
    if not text:
        return None
    return Heading(level=len(match.group("hashes")), text=text)


def iter_headings(lines: Iterable[str]) -> Iterator[Heading]:
    """Yield the headings found in ``lines``, in order."""
    for line in lines:
        heading = parse_heading(line)
        if heading is not None:
            yield heading
