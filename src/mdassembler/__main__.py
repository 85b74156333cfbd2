"""Entry point for ``python -m mdassembler``."""

import sys

from mdassembler.cli import main

if __name__ == "__main__":
    sys.exit(main())
