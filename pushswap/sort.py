"""Sorting strategies that drive a PushSwap by its operations."""

from collections.abc import Sequence

from .parsing import is_sorted
from .stacks import PushSwap, max_index, min_index


def sort_two(stacks: PushSwap) -> None:
    """Sort a two-element stack ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: PushSwap) -> None:
    """Sort a three-element stack ``a`` in at most two operations."""
    a = stacks.a
    first, second, third = a[0], a[1], a[2]
    if first > second and first > third:
        stacks.ra()
        if a[0] > a[1]:
            stacks.sa()
    elif second > first and second > third:
        stacks.rra()
        if a[0] > a[1]:
            stacks.sa()
    elif third > first and third > second:
        if a[0] > a[1]:
            stacks.sa()


def sort_small(stacks: PushSwap) -> None:
    """Sort four or five elements: park the minima on ``b``, sort three, push back."""
    pushed = 0
    for _ in range(len(stacks.a) - 3):
        best_rotate(stacks, min_index(stacks.a), True)
        stacks.pb()
        pushed += 1
    sort_three(stacks)
    for _ in range(pushed):
        stacks.pa()


def find_part(values: Sequence[int], part: int) -> int:
    """Index of the first value below ``part``, or ``len(values)`` if none is."""
    return next((i for i, value in enumerate(values) if value < part), len(values))


def best_rotate(stacks: PushSwap, pos: int, is_a: bool) -> None:
    """Bring position ``pos`` of ``a`` (or ``b``) to the top by the shorter way."""
    stack = stacks.a if is_a else stacks.b
    forward = stacks.ra if is_a else stacks.rb
    backward = stacks.rra if is_a else stacks.rrb
    size = len(stack)
    if pos <= size // 2:
        for _ in range(pos):
            forward()
    else:
        for _ in range(size - pos):
            backward()


def push_back_to_b(stacks: PushSwap, count: int) -> None:
    """Move ``count`` elements from ``b`` to ``a``, largest first."""
    for _ in range(count):
        best_rotate(stacks, max_index(stacks.b), False)
        stacks.pa()


def sort_big(stacks: PushSwap) -> None:
    """Sort by pushing ``a`` onto ``b`` in chunks, then pulling back maxima."""
    size = len(stacks.a)
    step = size // 5 if size <= 100 else size // 11 - 2
    step = max(step, 1)
    pushed = 0
    part = 0
    while stacks.a:
        part += step
        while pushed < part and stacks.a:
            best_rotate(stacks, find_part(stacks.a, part), True)
            stacks.pb()
            pushed += 1
    push_back_to_b(stacks, pushed)


def sort_stacks(stacks: PushSwap) -> list[str]:
    """Sort ``a`` with the strategy suited to its size; return the operations."""
    if not is_sorted(stacks.a):
        size = len(stacks.a)
        if size == 2:
            sort_two(stacks)
        elif size == 3:
            sort_three(stacks)
        elif size in (4, 5):
            sort_small(stacks)
        else:
            sort_big(stacks)
    return stacks.operations