"""
Command-line driver for EspLox.

    esplox programa.esp      # scan and parse a file
    esplox                   # interactive prompt

Each input is scanned, its tokens listed, then parsed and the resulting
tree printed. Diagnostics go to stderr as they are found.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .diagnostics import DiagnosticSink, PrintingSink
from .lexer import Lexer, format_tokens
from .parser import Parser, ParseError, ASTPrinter

logger = logging.getLogger(__name__)

PROMPT = "EspLox> "
EXIT_WORD = "salir"


def run(source: str, filename: str, sink: DiagnosticSink, out: TextIO,
        show_tokens: bool = True) -> bool:
    """
    Scan and parse one piece of source text.

    Returns:
        True if neither stage reported a problem
    """
    lexer = Lexer(source, filename, sink)
    tokens, _ = lexer.transfer()

    if show_tokens:
        print(format_tokens(tokens), file=out)

    try:
        expr = Parser(tokens, sink).parse()
    except ParseError as e:
        logger.info("%s: %s (%s)", filename, e.category, e.code)
        return False

    print(ASTPrinter().print(expr), file=out)
    return not lexer.has_errors()


def run_file(path: str, sink: DiagnosticSink, out: TextIO, err: TextIO,
             show_tokens: bool = True) -> int:
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"Could not open file {path}: {e.strerror or e}", file=err)
        return 1

    return 0 if run(source, path, sink, out, show_tokens) else 1


def run_prompt(sink: DiagnosticSink, stdin: TextIO, out: TextIO,
               show_tokens: bool = True) -> int:
    """Read-parse-print loop; ends on end of input, a blank line or 'salir'."""
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break

        line = line.rstrip("\r\n")
        if not line.strip() or line.strip() == EXIT_WORD:
            break

        run(line, "<stdin>", sink, out, show_tokens)

    return 0


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Main entry point; returns the process exit code."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = argparse.ArgumentParser(
        prog="esplox",
        description="Scan and parse EspLox expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    esplox                      # Interactive prompt, type 'salir' to quit
    esplox programa.esp         # Parse a file
    esplox --no-tokens f.esp    # Only print the expression tree
        """
    )

    parser.add_argument('path', nargs='?',
                        help='Source file to parse (omit for the interactive prompt)')
    parser.add_argument('--tokens', dest='show_tokens', action='store_true', default=True,
                        help='List the scanned tokens (default)')
    parser.add_argument('--no-tokens', dest='show_tokens', action='store_false',
                        help='Do not list the scanned tokens')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level for internal traces')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    sink = PrintingSink(stderr)

    if args.path is not None:
        logger.info("Parsing file %s", args.path)
        return run_file(args.path, sink, stdout, stderr, args.show_tokens)

    return run_prompt(sink, stdin, stdout, args.show_tokens)


if __name__ == "__main__":
    sys.exit(main())
