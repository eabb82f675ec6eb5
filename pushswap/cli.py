"""Command line entry point: print the operations that sort the arguments."""

import sys
from collections.abc import Sequence

from .parsing import InputError, is_sorted, parse_arguments
from .sort import sort_stacks
from .stacks import PushSwap


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, sort them and print one operation per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("error")
        sys.stdout.flush()
        return 1
    if is_sorted(values):
        return 0
    for operation in sort_stacks(PushSwap(values)):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())