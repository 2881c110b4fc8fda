"""Command line entry: validate the numbers, build stack A and report its order."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.libft.strings import split
from pushswap.stack import Stack
from pushswap.validation import InputError, validate_arguments

__all__ = ["build_stack_a", "main"]


def build_stack_a(argv: Sequence[str]) -> Stack:
    """Build stack A from the arguments, program name excluded.

    A single argument is split on spaces; several arguments give one value each.
    """
    if len(argv) == 1:
        return Stack.from_tokens(split(argv[0], " "))
    return Stack.from_tokens(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments and print 1 if stack A is in order, else 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_arguments(args)
    except InputError as error:
        print(error)
        return 0
    stack_a = build_stack_a(args)
    print(int(stack_a.is_in_order()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())