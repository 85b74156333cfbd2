"""Markdown heading model."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]")


class Heading(BaseModel):
    """A parsed ATX heading.

    Attributes:
        level: Number of leading ``#`` characters (1-6).
        text: Heading title with surrounding whitespace and any closing
            hash sequence removed.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str

    @property
    def slug(self) -> str:
        """GitHub-style anchor for the heading text."""
        slug = _WHITESPACE_RE.sub("-", self.text.strip().lower())
        return _NON_SLUG_RE.sub("", slug)

    @property
    def link(self) -> str:
        """Inline markdown link pointing at this heading."""
        return f"[{self.text}](#{self.slug})"
