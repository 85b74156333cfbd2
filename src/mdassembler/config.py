"""Local configuration for mdassembler."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PRISTINE = "false"

MDASSEMBLER_ENCODING = os.getenv("MDASSEMBLER_ENCODING", DEFAULT_ENCODING)
MDASSEMBLER_LOG_LEVEL = os.getenv("MDASSEMBLER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDASSEMBLER_PRISTINE = os.getenv("MDASSEMBLER_PRISTINE", DEFAULT_PRISTINE).lower() in {"1", "true", "yes"}
