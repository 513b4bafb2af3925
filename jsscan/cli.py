#!/usr/bin/env python3
"""
jsscan command-line entry point
===============================

Scans one source file, prints the token/warning trace to stdout and writes
the JSON report.

Usage:
    jsscan <filename> [options]

Options:
    -o, --output PATH        Report path (default: stats.json)
    --check-semicolons       Warn on statement lines without ';'
    --max-token-length N     Truncate token text in the trace
    -q, --quiet              Do not print the trace
    -v, --verbose            Debug logging on stderr

Exit status is 0 on success and 1 when the arguments are invalid, no file
is given, the file cannot be opened, or the report cannot be written.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import ScanConfig, DEFAULT_REPORT_PATH
from .lexer.errors import ScanError
from .pipeline import scan_file
from .utils.logger import get_logger

logger = get_logger(__name__)

PROG = "jsscan"


class UsageError(Exception):
    """Command-line arguments could not be parsed."""


class ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad arguments by raising instead of exiting with 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog=PROG,
        description="Lexical scanner for JavaScript-like source with declaration tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  jsscan app.js                        # Trace to stdout, report to stats.json
  jsscan app.js -o report.json -q      # Report only
  jsscan app.js --check-semicolons     # Also warn on missing ';'
        """
    )
    parser.add_argument('filename', nargs='?',
                        help='Source file to scan')
    parser.add_argument('-o', '--output', default=DEFAULT_REPORT_PATH,
                        help='Where to write the JSON report (default: %(default)s)')
    parser.add_argument('--check-semicolons', action='store_true',
                        help='Warn when a statement line ends without a semicolon')
    parser.add_argument('--max-token-length', type=int, default=None, metavar='N',
                        help='Truncate token text to N characters')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print the token trace')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1

    if not args.filename:
        print(f"Usage: {PROG} <filename>")
        return 1

    configure_logging(args.verbose)

    try:
        config = ScanConfig(
            check_semicolons=args.check_semicolons,
            max_token_length=args.max_token_length,
            report_path=args.output,
            emit_trace=not args.quiet,
        )
    except ValueError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 1

    try:
        report = scan_file(args.filename, config)
        report.write(config.report_path)
    except ScanError as e:
        logger.debug("scan aborted", exc_info=True)
        print(e.message, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
