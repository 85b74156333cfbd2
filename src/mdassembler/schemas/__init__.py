"""Shared schemas for mdassembler."""

from mdassembler.schemas.heading import Heading
from mdassembler.schemas.inclusion import Inclusion
from mdassembler.schemas.options import AssemblerOptions

__all__ = ["AssemblerOptions", "Heading", "Inclusion"]
