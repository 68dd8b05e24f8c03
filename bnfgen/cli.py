"""Command line entry point: generate a random sentence from a grammar file."""

from __future__ import annotations

import sys

from bnfgen.grammar import GrammarError, load_grammar
from bnfgen.parser import ParseError
from bnfgen.scanner import ScanError

START_SYMBOL_FLAG = "-s"
FILE_FLAG = "-f"
_FLAGS = frozenset({START_SYMBOL_FLAG, FILE_FLAG})


class _UsageError(ValueError):
    """Raised for malformed command line arguments."""


def parse_args(argv: list[str]) -> tuple[str | None, str]:
    """Return ``(start_symbol, file_name)``; the start symbol may be None."""
    start_symbol: str | None = None
    file_name = ""
    args = iter(argv)
    for arg in args:
        if arg == START_SYMBOL_FLAG:
            value = next(args, None)
            if value is None or value in _FLAGS:
                raise _UsageError(f"{START_SYMBOL_FLAG} flag should have a start symbol")
            start_symbol = value
        elif arg == FILE_FLAG:
            value = next(args, None)
            if value is None or value in _FLAGS:
                raise _UsageError(f"{FILE_FLAG} flag should have a file name")
            file_name = value
        else:
            raise _UsageError(f"unknown flag: {arg}")
    if not file_name:
        raise _UsageError(f"{FILE_FLAG} flag should be specified")
    return start_symbol, file_name


def main(argv: list[str] | None = None) -> int:
    """Run the generator; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        start_symbol, file_name = parse_args(argv)
        with open(file_name, "rb") as handle:
            text = handle.read().decode("utf-8", errors="replace")
        grammar = load_grammar(text)
        start = start_symbol or grammar.start or ""
        result = grammar.generate(grammar.lookup(start))
    except (_UsageError, ScanError, ParseError, GrammarError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())