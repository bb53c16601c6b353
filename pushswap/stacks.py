"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _swap(stack: deque[int]) -> None:
    """Exchange the two topmost elements; does nothing with fewer than two."""
    if len(stack) < 2:
        return
    stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    """Move the top element to the bottom."""
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    """Move the bottom element to the top."""
    stack.rotate(1)


def _push(dest: deque[int], src: deque[int]) -> None:
    """Move the top of ``src`` onto ``dest``; does nothing if ``src`` is empty."""
    if src:
        dest.appendleft(src.popleft())


class Stacks:
    """Stacks ``a`` and ``b`` with the list of operations applied so far.

    The top of each stack is at index 0. Every operation is recorded in
    ``moves`` under its name, even when it leaves the stacks unchanged.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the first two elements of ``a``."""
        _swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the first two elements of ``b``."""
        _swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the first two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.moves.append("ss")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the top becomes the bottom."""
        _rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards: the top becomes the bottom."""
        _rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        _rotate(self.a)
        _rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the bottom becomes the top."""
        _reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards: the bottom becomes the top."""
        _reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.moves.append("rrr")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.a, self.b)
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.b, self.a)
        self.moves.append("pb")