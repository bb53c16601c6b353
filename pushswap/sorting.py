"""Choosing the operations that sort stack ``a`` in ascending order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """Tell whether ``values`` are in non-decreasing order from the top."""
    return all(first <= second for first, second in pairwise(values))


def _above_median(index: int, length: int) -> bool:
    return index <= length // 2


def _smallest_index(values: Sequence[int]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def rotation_cost(index: int, length: int) -> int:
    """Count the rotations needed to bring position ``index`` to the top."""
    return index if _above_median(index, length) else length - index


def target_index(value: int, stack_a: Iterable[int]) -> int:
    """Index in ``stack_a`` of the smallest element bigger than ``value``.

    When no element is bigger, the index of the smallest element is returned.
    """
    values = list(stack_a)
    bigger = [(candidate, index) for index, candidate in enumerate(values) if candidate > value]
    if bigger:
        return min(bigger)[1]
    return _smallest_index(values)


def cheapest_index(stacks: Stacks) -> int:
    """Index in ``b`` of the element that is cheapest to move into place in ``a``."""
    len_a, len_b = len(stacks.a), len(stacks.b)
    if not len_b:
        raise ValueError("stack b is empty")
    prices = [
        rotation_cost(index, len_b) + rotation_cost(target_index(value, stacks.a), len_a)
        for index, value in enumerate(stacks.b)
    ]
    return min(range(len_b), key=prices.__getitem__)


def _bring_to_top(stacks: Stacks, name: str, value: int) -> None:
    if name == "a":
        stack, up, down = stacks.a, stacks.ra, stacks.rra
    else:
        stack, up, down = stacks.b, stacks.rb, stacks.rrb
    step = up if _above_median(stack.index(value), len(stack)) else down
    while stack[0] != value:
        step()


def _move_cheapest(stacks: Stacks) -> None:
    index = cheapest_index(stacks)
    cheapest = stacks.b[index]
    target_position = target_index(cheapest, stacks.a)
    target = stacks.a[target_position]
    cheapest_up = _above_median(index, len(stacks.b))
    target_up = _above_median(target_position, len(stacks.a))
    if cheapest_up and target_up:
        while stacks.a[0] != target and stacks.b[0] != cheapest:
            stacks.rr()
    elif not cheapest_up and not target_up:
        while stacks.a[0] != target and stacks.b[0] != cheapest:
            stacks.rrr()
    _bring_to_top(stacks, "b", cheapest)
    _bring_to_top(stacks, "a", target)
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of ``a`` with at most two operations."""
    a = stacks.a
    if len(a) < 3:
        return
    first, second, third = a[0], a[1], a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second < third:
        stacks.ra()
    elif first > second and second > third:
        stacks.ra()
        stacks.sa()
    elif first < second and second > third and first < third:
        stacks.rra()
        stacks.sa()
    elif first < second and second > third:
        stacks.rra()


def handle_five(stacks: Stacks) -> None:
    """Push the smallest elements of ``a`` to ``b`` until three remain."""
    while len(stacks.a) > 3:
        _bring_to_top(stacks, "a", min(stacks.a))
        stacks.pb()


def push_swap(stacks: Stacks) -> None:
    """Sort ``a`` using ``b`` as scratch space, leaving ``b`` empty."""
    if len(stacks.a) == 5:
        handle_five(stacks)
    else:
        for _ in range(len(stacks.a) - 3):
            stacks.pb()
    sort_three(stacks)
    while stacks.b:
        _move_cheapest(stacks)
    if stacks.a:
        _bring_to_top(stacks, "a", min(stacks.a))


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``, top first."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        if len(stacks.a) == 3:
            sort_three(stacks)
        else:
            push_swap(stacks)
    return stacks.moves