"""The two stacks and the eleven push_swap operations."""

from collections.abc import Iterable, Sequence


def _swap(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: list[int], dst: list[int]) -> None:
    if src:
        dst.insert(0, src.pop(0))


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


class PushSwap:
    """Stacks ``a`` and ``b`` (index 0 is the top) and the operations applied.

    Every operation is recorded by name in ``operations``, even when it
    has no effect on the stacks.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={self.a!r}, b={self.b!r})"

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        _swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        _swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.b, self.a)
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.a, self.b)
        self.operations.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` so its top becomes its bottom."""
        _rotate(self.a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` so its top becomes its bottom."""
        _rotate(self.b)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` so its bottom becomes its top."""
        _reverse_rotate(self.a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom becomes its top."""
        _reverse_rotate(self.b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append("rrr")


def max_index(values: Sequence[int]) -> int:
    """Index of the first occurrence of the largest value."""
    if not values:
        raise ValueError("max_index() of an empty sequence")
    return max(range(len(values)), key=values.__getitem__)


def min_index(values: Sequence[int]) -> int:
    """Index of the first occurrence of the smallest value."""
    if not values:
        raise ValueError("min_index() of an empty sequence")
    return min(range(len(values)), key=values.__getitem__)