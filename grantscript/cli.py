"""
grant-lex: dump the token stream of a GrantScript source file.

Usage: grant-lex [FILE] [--strict] [--verbose]

Prints one token per line as TYPE<TAB>value. A lexer error is reported on
stderr and the process exits with status 1.
"""

import argparse
import logging
import sys

from .lexer import Lexer, LexerError

LOG = logging.getLogger("grantscript")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grant-lex",
        description="Tokenize GrantScript source and print the token stream"
    )
    parser.add_argument("file", nargs="?", default="-",
                        help="Source file to tokenize (default: read stdin)")
    parser.add_argument("--strict", action="store_true",
                        help="Reject unterminated strings and ++/-- without a target")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose logging")
    return parser


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.file == "-":
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            LOG.error("Cannot read %s: %s", args.file, e)
            return 2
        filename = args.file

    try:
        tokens = Lexer(source, filename, strict=args.strict).tokenize()
    except LexerError as e:
        sys.stderr.write(f"{filename}: {e}")
        return 1

    for token in tokens:
        sys.stdout.write(f"{token.type.name}\t{token.value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
