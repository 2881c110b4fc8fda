"""The two stacks of plates and the moves between them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise

from pushswap.libft.strings import atoi

__all__ = [
    "Plate",
    "Stack",
    "push_to_a",
    "push_to_b",
    "rotate_both",
    "reverse_rotate_both",
]


@dataclass
class Plate:
    """One element of a stack: its value, position and move bookkeeping."""

    value: int
    index: int = 0
    cost: int = 0
    moves_a_ra: int = 0
    moves_a_rra: int = 0
    moves_b_rb: int = 0
    moves_b_rrb: int = 0


class Stack:
    """A stack of plates whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._plates = [Plate(value) for value in values]
        self._reindex()

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> Stack:
        """Build a stack from number strings, first token on top."""
        return cls(atoi(token) for token in tokens)

    def _reindex(self) -> None:
        for position, plate in enumerate(self._plates):
            plate.index = position

    def _pop_top(self) -> Plate | None:
        if not self._plates:
            return None
        plate = self._plates.pop(0)
        self._reindex()
        return plate

    def _push_top(self, plate: Plate) -> None:
        self._plates.insert(0, plate)
        self._reindex()

    def __len__(self) -> int:
        return len(self._plates)

    def __iter__(self) -> Iterator[Plate]:
        return iter(self._plates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values()!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [plate.value for plate in self._plates]

    def _set_values(self, values: list[int]) -> None:
        for plate, value in zip(self._plates, values):
            plate.value = value

    def rotate(self) -> None:
        """Move the top value to the bottom; every other value shifts up."""
        if len(self._plates) < 2:
            return
        values = self.values()
        self._set_values(values[1:] + values[:1])

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top; every other value shifts down."""
        if len(self._plates) < 2:
            return
        values = self.values()
        self._set_values(values[-1:] + values[:-1])

    def find_min(self) -> Plate:
        """Return the first plate holding the smallest value.

        Raises ValueError on an empty stack.
        """
        if not self._plates:
            raise ValueError("find_min on an empty stack")
        return min(self._plates, key=lambda plate: plate.value)

    def is_in_order(self) -> bool:
        """Return True if the values ascend from the smallest one.

        The run from the minimum to the bottom must ascend, and so must the
        run from the top up to and including the minimum.
        """
        if len(self._plates) < 2:
            return True
        values = self.values()
        start = self.find_min().index
        if any(a > b for a, b in pairwise(values[start:])):
            return False
        if start == 0:
            return True
        return not any(a > b for a, b in pairwise(values[:start + 1]))


def push_to_a(stack_a: Stack, stack_b: Stack) -> None:
    """Move the top plate of ``stack_b`` onto ``stack_a``; nothing if b is empty."""
    plate = stack_b._pop_top()
    if plate is not None:
        stack_a._push_top(plate)


def push_to_b(stack_a: Stack, stack_b: Stack) -> None:
    """Move the top plate of ``stack_a`` onto ``stack_b``; nothing if a is empty."""
    plate = stack_a._pop_top()
    if plate is not None:
        stack_b._push_top(plate)


def rotate_both(stack_a: Stack, stack_b: Stack) -> None:
    """Rotate both stacks."""
    stack_a.rotate()
    stack_b.rotate()


def reverse_rotate_both(stack_a: Stack, stack_b: Stack) -> None:
    """Reverse-rotate both stacks."""
    stack_a.reverse_rotate()
    stack_b.reverse_rotate()