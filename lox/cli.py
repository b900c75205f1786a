"""
Command-line host for the Lox scanner.

    lox script.lox     # scan a file, exit 65 on lexical errors
    lox                # interactive prompt, one line at a time

Tokens go to stdout, diagnostics to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import scan, ScanResult
from .log import LOG_LEVELS, default_level, get_logger

logger = logging.getLogger(__name__)

# sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

USAGE = "Usage: lox [script]"
PROMPT = "> "


def run(source: str, out: TextIO = None, err: TextIO = None) -> ScanResult:
    """Scan one source string and print its tokens and diagnostics."""
    out = out or sys.stdout
    err = err or sys.stderr

    result = scan(source)

    for token in result.tokens:
        print(token, file=out)
    for diagnostic in result.diagnostics:
        print(diagnostic, file=err)

    return result


def run_file(path: str) -> int:
    """Scan a whole file. Returns the process exit status."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"lox: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return EX_NOINPUT
    except UnicodeDecodeError as e:
        print(f"lox: cannot decode {path}: {e}", file=sys.stderr)
        return EX_DATAERR

    logger.info("Scanning %s", path)
    result = run(source)

    if result.has_errors:
        return EX_DATAERR
    return EX_OK


def run_prompt(stdin: TextIO = None) -> int:
    """
    Read-scan-print loop until end of input.

    Errors on one line are printed and then forgotten; the next line
    starts clean.
    """
    stdin = stdin or sys.stdin

    while True:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        line = stdin.readline()
        if not line:
            break
        result = run(line.rstrip('\n'))
        if result.has_errors:
            logger.debug("Line had %d error(s)", len(result.diagnostics))

    sys.stdout.write('\n')
    return EX_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox hello.lox                      # Scan a file
    lox                                # Interactive prompt
    lox --log-level DEBUG hello.lox    # Trace the scanner on stderr
        """
    )

    parser.add_argument('script', nargs='*',
                        help='Source file to scan (omit for the prompt)')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='Logger level (default: $LOX_LOG_LEVEL or WARNING)')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""
    args = build_parser().parse_args(argv)

    get_logger("lox", args.log_level or default_level())

    if len(args.script) > 1:
        print(USAGE, file=sys.stderr)
        return EX_USAGE
    if args.script:
        return run_file(args.script[0])
    return run_prompt()


if __name__ == "__main__":
    sys.exit(main())
