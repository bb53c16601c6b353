"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_stack, split_words
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        args = split_words(args[0], " ")
        if not args:
            return 1
    try:
        values = parse_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in solve(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())