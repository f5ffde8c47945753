"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, parse_arguments
from .sorting import sort_board
from .stacks import Board

FAILURE = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read integers from the arguments, write the sorting moves to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return FAILURE
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return FAILURE
    if not values:
        return FAILURE
    board = Board(values, out=sys.stdout)
    sort_board(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())