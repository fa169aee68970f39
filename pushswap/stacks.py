"""The two stacks and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top at index 0, with a log of emitted moves."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.moves: list[str] = []
        self.ra_rr = 0
        self.rb_rr = 0

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _emit(self, move: str) -> None:
        self.moves.append(move)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def sa(self, record: bool = True) -> None:
        """Swap the two top items of ``a``."""
        if self._swap(self.a) and record:
            self._emit("sa")

    def sb(self, record: bool = True) -> None:
        """Swap the two top items of ``b``."""
        if self._swap(self.b) and record:
            self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self, record: bool = True) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if not self._rotate(self.a, -1):
            return
        if record:
            self._emit("ra")
        self.ra_rr = 0

    def rb(self, record: bool = True) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if self._rotate(self.b, -1) and record:
            self._emit("rb")
        self.rb_rr = 0

    def rr(self) -> None:
        """Rotate both stacks."""
        self.ra(False)
        self.rb(False)
        self._emit("rr")

    def rra(self, record: bool = True) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if self._rotate(self.a, 1) and record:
            self._emit("rra")

    def rrb(self, record: bool = True) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if self._rotate(self.b, 1) and record:
            self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.rra(False)
        self.rrb(False)
        self._emit("rrr")