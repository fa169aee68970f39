"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .helpers import has_duplicates, is_strictly_ascending
from .parsing import ParseError, parse_arguments
from .sorter import Sorter


def _error() -> int:
    sys.stderr.write("Error\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, sort them and print one move per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except ParseError:
        return _error()
    if len(numbers) < 2:
        return 0
    if has_duplicates(numbers):
        return _error()
    if is_strictly_ascending(numbers):
        return 0
    moves = Sorter(numbers).run()
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())