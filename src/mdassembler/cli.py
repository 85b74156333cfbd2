"""Command-line front end for mdassembler."""

from __future__ import annotations

import argparse
import logging
import sys

from mdassembler.assembler import MarkdownAssembler
from mdassembler.exceptions import MarkdownAssemblerError
from mdassembler.utils.logging_config import configure_logging

_COMMANDS = {
    "include": "Expand include directives in a template into a markdown file.",
    "create_page_toc": "Replace the page TOC directive in a template, leaving other directives as-is.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdassembler",
        description="Assemble markdown documents from templates with include directives.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in _COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("template_path", help="Template file to read")
        sub.add_argument("markdown_path", help="Markdown file to write")
        sub.add_argument("--pristine", action="store_true", help="Collapse blank lines left around includes")
        sub.add_argument("-v", "--verbose", action="store_true", help="Log each inclusion to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    try:
        assembler = MarkdownAssembler({"pristine": args.pristine})
        getattr(assembler, args.command)(args.template_path, args.markdown_path)
    except MarkdownAssemblerError as exc:
        print(str(exc).rstrip("\n"), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
