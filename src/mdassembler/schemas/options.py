"""Engine option model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from mdassembler.config import MDASSEMBLER_PRISTINE


class AssemblerOptions(BaseModel):
    """Options accepted by :class:`mdassembler.MarkdownAssembler`.

    Attributes:
        pristine: If True, collapse blank lines that expansion leaves
            around include directives.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    pristine: bool = MDASSEMBLER_PRISTINE
