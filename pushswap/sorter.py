"""The median-split strategy that sorts stack ``a`` using stack ``b``."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from .helpers import (
    calc_median,
    calc_pushed,
    drop_front,
    find_smallest,
    has_duplicates,
    is_strictly_ascending,
    prepend_reversed,
    sorted_copy,
)
from .stacks import Stacks


def _remove_front(numbers: Sequence[int], size: int, pushed: int) -> list[int]:
    """Drop ``pushed`` items from the front and keep at most ``size`` of the rest."""
    return drop_front(numbers, pushed)[: max(size, 0)]


def _add_front(dst: Sequence[int], dst_size: int, src: Sequence[int], pushed: int) -> list[int]:
    """Put ``pushed`` items of ``src``, reversed, before ``dst_size`` items of ``dst``."""
    return prepend_reversed(list(dst)[: max(dst_size, 0)], src, pushed)


class Sorter:
    """Sorts a list of distinct integers, recording the stack moves it makes."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.numbers: list[int] = list(numbers)
        self.stacks = Stacks(self.numbers)
        self.cs: defaultdict[int, int] = defaultdict(int)
        self.ci = 0
        self.med1 = 0
        self.med2 = 0
        self.is_first = False
        self.sorted_a: list[int] = []
        self.sorted_b: list[int] = []
        self.last_pushed = 0
        self.last_rotated = 0
        self.og_size = 0

    def __repr__(self) -> str:
        return f"Sorter({self.stacks!r}, ci={self.ci})"

    @property
    def size_a(self) -> int:
        return len(self.stacks.a)

    @property
    def size_b(self) -> int:
        return len(self.stacks.b)

    def _peek_a(self, index: int) -> int:
        stack = self.stacks.a
        return stack[index % len(stack)]

    def _bring_to_top(self, value: int) -> int:
        """Rotate ``a`` until ``value`` is on top; return the number of rotations."""
        if value not in self.stacks.a:
            raise RuntimeError(f"value {value} is not on stack a")
        rotations = 0
        while self.stacks.a[0] != value:
            self.stacks.ra()
            rotations += 1
        return rotations

    def run(self) -> list[str]:
        """Sort the numbers and return the moves that were made."""
        self.handle_median_push_b()
        self.handle_median_push_a()
        return self.stacks.moves

    def update_arrays(self, flag: int) -> None:
        """Keep the sorted mirrors of both stacks in step after a transfer."""
        if flag == 0:
            self.sorted_a = _add_front(
                self.sorted_a, self.size_a - self.last_pushed, self.sorted_b, self.last_pushed
            )
            self.sorted_b = _remove_front(self.sorted_b, self.size_b, self.last_pushed)
        elif flag == 1:
            self.sorted_b = _add_front(
                self.sorted_b, self.size_b - self.last_pushed, self.sorted_a, self.last_pushed
            )
            self.sorted_a = _remove_front(self.sorted_a, self.size_a, self.last_pushed)
        elif flag == 2:
            chunk = self.cs[self.ci]
            self.sorted_b = _add_front(self.sorted_b, self.size_b - chunk, self.sorted_a, chunk)
            self.sorted_a = _remove_front(self.sorted_a, self.size_a, chunk)
        elif flag == 3:
            self.sorted_a = _add_front(
                self.sorted_a, self.size_a - self.last_pushed, self.sorted_b, self.last_pushed
            )
            self.sorted_b = _remove_front(self.sorted_b, self.size_b, self.cs[self.ci])
        elif flag == 4:
            self.sorted_a = _add_front(self.sorted_a, self.size_a - 7, self.sorted_b, 7)
            self.sorted_b = _remove_front(self.sorted_b, self.size_b, 7)
        else:
            raise ValueError(f"unknown update flag: {flag!r}")

    # Phase one: split ``a`` into chunks on ``b``.

    def handle_median_push_b(self) -> None:
        """Move everything but three numbers to ``b`` in median-bounded chunks."""
        stacks = self.stacks
        self.sorted_a = sorted_copy(self.numbers)
        if self.size_a == 2:
            if stacks.a[0] > stacks.a[1]:
                stacks.sa()
            return
        if self.size_a in (3, 4):
            if self.size_a == 4:
                self.last_median_push_b()
            self.first_sort_a()
            stacks.pa()
            return
        self.first_median_push_b()
        if self.size_a > 4 and self.size_a != 5:
            self.second_median_push_b()
        while self.size_a > 4:
            self.median_push_b()
        if self.size_a == 4:
            self.last_median_push_b()
        self.first_sort_a()

    def first_median_push_b(self) -> None:
        """Push the first, smallest chunks to ``b``."""
        size = self.size_a
        if size <= 6:
            self.med1 = calc_median(self.sorted_a[:size])
            self.med2 = calc_median(self.sorted_a[: size // 2])
        else:
            self.med1 = calc_median(self.sorted_a[: size // 2])
            self.med2 = calc_median(self.sorted_a[: size // 4])
        self.ci += 2
        self.cs[0] = 0
        self.cs[1] = 0
        self.cs[2] = 0
        self.is_first = True
        self.process_stack_push_b(0)
        self.sorted_a = _remove_front(self.sorted_a, self.size_a, self.last_pushed)

    def second_median_push_b(self) -> None:
        """Push the second pair of chunks to ``b``."""
        self.ci += 2
        self.cs[2] = 0
        self.cs[3] = 0
        self.med1 = calc_median(self.sorted_a[: self.size_b * 2])
        self.med2 = calc_median(self.sorted_a[: self.size_b])
        self.is_first = False
        self.process_stack_push_b(2)
        for _ in range(self.cs[3]):
            self.stacks.rrb()
        self.sorted_a = _remove_front(self.sorted_a, self.size_a, self.last_pushed)

    def median_push_b(self) -> None:
        """Push the lower half of what remains on ``a`` as two chunks."""
        ci = self.ci
        self.cs[ci] = 0
        self.cs[ci + 1] = 0
        self.med1 = calc_median(self.sorted_a[: self.size_a])
        self.med2 = calc_median(self.sorted_a[: self.size_a // 2])
        self.process_stack_push_b(ci)
        for _ in range(self.cs[ci + 1]):
            self.stacks.rrb()
        self.ci += 2
        if self.size_a == 3:
            self.ci -= 1
        self.sorted_a = _remove_front(self.sorted_a, self.size_a, self.last_pushed)

    def last_median_push_b(self) -> None:
        """Push the smallest of four numbers so that three remain."""
        self.cs[self.ci] = 1
        self._bring_to_top(find_smallest(self.sorted_a[: self.size_a]))
        self.stacks.pb()
        self.last_pushed = 1
        self.sorted_a = _remove_front(self.sorted_a, self.size_a, self.last_pushed)

    def manage_chunk_push_b(self, ci: int) -> None:
        """Assign the number just pushed to one of the two chunks at ``ci``."""
        top = self.stacks.b[0]
        if (not self.is_first and top > self.med2) or (self.is_first and top < self.med2):
            self.stacks.rb_rr = 1
            self.cs[ci if self.is_first else ci + 1] += 1
        else:
            self.cs[ci + 1 if self.is_first else ci] += 1

    def process_stack_push_b(self, ci: int) -> None:
        """Push every number below ``med1`` to ``b``, rotating past the rest."""
        stacks = self.stacks
        self.last_pushed = calc_pushed(self.sorted_a[: self.size_a], self.med1, 1)
        pushed = self.last_pushed
        while pushed > 0:
            if stacks.a[0] < self.med1:
                if stacks.rb_rr == 1:
                    stacks.rb()
                stacks.pb()
                self.manage_chunk_push_b(ci)
                pushed -= 1
            elif self.size_a > 3 and stacks.rb_rr == 1:
                stacks.rr()
            elif self.size_a > 3:
                stacks.ra()
            else:
                raise RuntimeError("no number below the median is left on stack a")
        if stacks.rb_rr == 1:
            stacks.rb()

    # Phase two: bring the chunks back onto ``a`` in order.

    def handle_median_push_a(self) -> None:
        """Return the chunks from ``b`` to ``a``, sorting each on the way."""
        if self.size_b <= 0:
            return
        self.sorted_b = sorted_copy(self.stacks.b, descending=True)
        cs = self.cs
        while self.size_b > 0:
            if cs[self.ci] <= 3 and self.size_b > 0:
                self.handle_small_chunks()
            if self.size_a == 6 and self.size_b == 0:
                self.sort_3(0)
            while 0 < cs[self.ci] <= 6 and self.size_b > 0:
                self.sort_6(0)
            while 6 < cs[self.ci] <= 12 and self.size_b > 0:
                self.sort_12()
            while cs[self.ci] == 13 and self.size_b > 0:
                self.sort_13()
            while cs[self.ci] > 13 and self.size_b > 0:
                self.handle_big_chunks()

    def handle_small_chunks(self) -> None:
        """Move chunks of up to three numbers back and sort them in place."""
        stacks = self.stacks
        cs = self.cs
        self.last_pushed = 0
        while cs[self.ci] <= 3 and self.size_b > 0:
            while cs[self.ci] == 0:
                if self.ci == 0:
                    raise RuntimeError("no chunk left to take from stack b")
                self.ci -= 1
            chunk_size = cs[self.ci]
            if chunk_size > 3:
                return
            for _ in range(chunk_size):
                stacks.pa()
                self.last_pushed += 1
            if cs[self.ci] == 2 and stacks.a[0] > stacks.a[1]:
                stacks.sa()
            elif cs[self.ci] == 3:
                self.sort_3(0)
            if self.ci > 0:
                self.ci -= 1
        self.update_arrays(0)

    def handle_big_chunks(self) -> None:
        """Split a chunk larger than twelve into smaller ones."""
        if self.cs[self.ci] <= 12:
            return
        self.push_big_chunks_pa()
        self.ci += 1
        self.first_push_big_chunks_pb()
        if self.og_size <= 3:
            for _ in range(self.last_rotated):
                self.stacks.rra()
            self.last_rotated = 0
            self.sort_3(0)
        else:
            self.ci += 1
            self.second_push_big_chunks_pb()

    def push_big_chunks_pa(self) -> None:
        """Move the upper half of the current chunk onto ``a``."""
        stacks = self.stacks
        chunk = self.sorted_b[: self.cs[self.ci]]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 0)
        to_push = self.last_pushed
        self.og_size = self.last_pushed
        self.last_rotated = 0
        while to_push > 0:
            if stacks.b[0] > self.med1:
                stacks.pa()
                to_push -= 1
            else:
                stacks.rb()
                self.last_rotated += 1
        for _ in range(self.last_rotated):
            stacks.rrb()
        self.last_rotated = 0
        self.cs[self.ci] -= self.last_pushed
        self.update_arrays(0)

    def first_push_big_chunks_pb(self) -> None:
        """Send the lower half of the numbers just moved back to ``b``."""
        stacks = self.stacks
        self.last_rotated = 0
        chunk = self.sorted_a[: self.last_pushed]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 2)
        for _ in range(self.og_size):
            if stacks.a[0] <= self.med1:
                stacks.pb()
            else:
                stacks.ra()
                self.last_rotated += 1
        self.cs[self.ci] = self.last_pushed
        self.og_size -= self.last_pushed
        self.update_arrays(1)

    def second_push_big_chunks_pb(self) -> None:
        """Split the rotated remainder again, leaving at most three on ``a``."""
        stacks = self.stacks
        chunk = self.sorted_a[: self.og_size]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 2)
        remaining = self.last_rotated - self.last_pushed
        self.cs[self.ci] = self.last_pushed
        for _ in range(self.last_rotated):
            stacks.rra()
            if stacks.a[0] <= self.med1:
                stacks.pb()
        self.last_rotated = 0
        self.update_arrays(1)
        if remaining <= 3:
            self.sort_3(0)
        else:
            self.ci += 1
            self.cs[self.ci] = remaining
            for _ in range(remaining):
                stacks.pb()
            self.update_arrays(2)

    # Small fixed-size sorts.

    def first_sort_a(self) -> None:
        """Sort ``a`` when it holds exactly three numbers."""
        if self.size_a != 3:
            return
        stacks = self.stacks
        a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
        if a > b and b < c and a < c:
            stacks.sa()
        elif a > b and b > c:
            stacks.sa()
            stacks.rra()
        elif a > b and b < c and a > c:
            stacks.ra()
        elif a < b and b > c and a < c:
            stacks.sa()
            stacks.ra()
        elif a < b and b > c and a > c:
            stacks.rra()

    def sort_3(self, last_rotated: int) -> None:
        """Sort the top three numbers of ``a`` without disturbing the rest."""
        stacks = self.stacks
        a, b, c = self._peek_a(0), self._peek_a(1), self._peek_a(2)
        if a < b < c:
            return
        if a > b and b < c and a < c:
            stacks.sa()
            return
        if (a > b and b > c) or (a > b and b < c and a > c):
            stacks.sa()
        stacks.ra()
        stacks.sa()
        if last_rotated >= 1:
            stacks.rrr()
            self.last_rotated -= 1
        else:
            stacks.rra()
        if (a < b and b > c and a > c) or (a > b and b > c):
            stacks.sa()

    def sort_4(self, last_rotated: int) -> None:
        """Sort the top four numbers of ``a``."""
        stacks = self.stacks
        rotated = self._bring_to_top(find_smallest(self.sorted_a[:4]))
        stacks.pb()
        for _ in range(rotated):
            stacks.rra()
        self.sort_3(last_rotated)
        stacks.pa()

    def sort_6(self, last_pushed_to_add: int) -> None:
        """Bring a chunk of up to six numbers back onto ``a`` sorted."""
        chunk_size = self.cs[self.ci]
        if chunk_size > 6:
            return
        stacks = self.stacks
        self.last_rotated = 0
        chunk = self.sorted_b[:chunk_size]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 0)
        pushed = self.last_pushed
        remaining = chunk_size - pushed
        self.last_pushed += remaining
        self.sort_6_push_rotate(pushed)
        self.sort_3(self.last_rotated)
        for _ in range(self.last_rotated):
            stacks.rrb()
        self.last_rotated = 0
        for _ in range(remaining):
            stacks.pa()
        self.sort_3(0)
        self.last_pushed += last_pushed_to_add
        if self.size_b > 0:
            self.update_arrays(3)
            self.ci -= 1

    def sort_6_push_rotate(self, pushed: int) -> int:
        """Push ``pushed`` numbers above ``med1`` to ``a``, rotating ``b`` past the rest."""
        stacks = self.stacks
        while pushed > 0:
            if stacks.b[0] <= self.med1:
                stacks.rb()
                self.last_rotated += 1
            else:
                stacks.pa()
                pushed -= 1
        return pushed

    def sort_12(self) -> None:
        """Bring a chunk of seven to twelve numbers back onto ``a`` sorted."""
        chunk_size = self.cs[self.ci]
        if chunk_size > 12:
            return
        stacks = self.stacks
        chunk = self.sorted_b[:chunk_size]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 0)
        last_pushed = self.last_pushed
        self.med2 = calc_median(self.sorted_b[: self.last_pushed])
        rotated, remaining = self.sort_12_13_rt(0)
        self.sort_3(0)
        for _ in range(rotated):
            stacks.rra()
        self.sort_3(0)
        for _ in range(remaining):
            stacks.rrb()
        self.sorted_b = _remove_front(self.sorted_b, self.size_b, last_pushed)
        self.sort_6(last_pushed)

    def sort_13(self) -> None:
        """Bring a chunk of exactly thirteen numbers back onto ``a`` sorted."""
        if self.cs[self.ci] != 13:
            return
        stacks = self.stacks
        chunk = self.sorted_b[:13]
        self.med1 = calc_median(chunk)
        self.last_pushed = calc_pushed(chunk, self.med1, 0) + 1
        last_pushed = self.last_pushed
        self.med2 = calc_median(self.sorted_b[: self.last_pushed])
        rotated, remaining = self.sort_12_13_rt(1)
        self.sort_3(0)
        for _ in range(rotated):
            stacks.rra()
        self.update_arrays(4)
        self.sort_4(0)
        for _ in range(remaining):
            stacks.rrb()
        self.sort_6(last_pushed)

    def sort_12_13_rt(self, flag: int) -> tuple[int, int]:
        """Push the upper part of a chunk to ``a``; return (rotated in a, rotated in b)."""
        stacks = self.stacks
        can_rr = 0
        rotated = 0
        remaining = 0
        while self.last_pushed > 0:
            top = stacks.b[0]
            if (top > self.med1 and flag == 0) or (top >= self.med1 and flag == 1):
                can_rr, did_rotate = self.sort_12_13_push(can_rr)
                rotated += did_rotate
            else:
                if can_rr == 1:
                    stacks.rr()
                    can_rr = 2
                else:
                    stacks.rb()
                remaining += 1
        return rotated, remaining

    def sort_12_13_push(self, can_rr: int) -> tuple[int, bool]:
        """Push one number to ``a``; return the new rotate state and whether it rotated."""
        stacks = self.stacks
        if can_rr == 1:
            stacks.ra()
            can_rr = 2
        stacks.pa()
        self.last_pushed -= 1
        self.cs[self.ci] -= 1
        if stacks.a[0] <= self.med2:
            if can_rr == 0:
                can_rr = 1
            else:
                stacks.ra()
            return can_rr, True
        return can_rr, False


def sort_numbers(numbers: Iterable[int]) -> list[str]:
    """Return the moves that sort ``numbers`` on stack ``a``.

    Raises ValueError when a number occurs twice. Fewer than two numbers
    or numbers already in ascending order need no moves.
    """
    values = list(numbers)
    if has_duplicates(values):
        raise ValueError("duplicate numbers")
    if len(values) < 2 or is_strictly_ascending(values):
        return []
    return Sorter(values).run()