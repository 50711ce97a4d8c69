# gridpath/core/grid.py
#!/usr/bin/env python3
from typing import Set, FrozenSet, Any, Iterable

from gridpath.core.types import Cell


class GridInitError(ValueError):
    """Grid built with bad size or endpoints. Not recoverable."""


def _is_cell(c: Any) -> bool:
    return (
        isinstance(c, tuple)
        and len(c) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in c)
    )


class Grid:
    """Square grid with two fixed endpoints and a set of blocked cells.

    size, start and goal are read-only. toggle() is the only way the blocked
    set changes; readers get a frozen copy from blocked_cells().
    """

    def __init__(self, size: int, start: Cell, goal: Cell, blocked: Iterable[Cell] = ()):
        if not isinstance(size, int) or isinstance(size, bool) or size < 2:
            raise GridInitError(f"size must be an int >= 2, got {size!r}")
        self._size = size
        if not self.contains(start):
            raise GridInitError(f"start {start!r} out of bounds for size {size}")
        if not self.contains(goal):
            raise GridInitError(f"goal {goal!r} out of bounds for size {size}")
        if start == goal:
            raise GridInitError(f"start and goal must differ, both are {start}")
        self._start = start
        self._goal = goal

        self._blocked: Set[Cell] = set()
        for c in blocked:
            if not self.contains(c):
                raise GridInitError(f"blocked cell {c!r} out of bounds")
            if self.is_protected(c):
                raise GridInitError(f"blocked cell {c} is an endpoint")
            self._blocked.add(c)

    @classmethod
    def square(cls, size: int = 10) -> "Grid":
        """Start in the (0,0) corner, goal in the opposite one."""
        return cls(size=size, start=(0, 0), goal=(size - 1, size - 1))

    @property
    def size(self) -> int:
        return self._size

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def goal(self) -> Cell:
        return self._goal

    def __repr__(self) -> str:
        return (f"Grid(size={self._size}, start={self._start}, goal={self._goal}, "
                f"blocked={len(self._blocked)})")

    def contains(self, c: Cell) -> bool:
        if not _is_cell(c):
            return False
        x, y = c
        return 0 <= x < self._size and 0 <= y < self._size

    def is_blocked(self, c: Cell) -> bool:
        return c in self._blocked

    def is_protected(self, c: Cell) -> bool:
        return c == self._start or c == self._goal

    def toggle(self, c: Cell) -> bool:
        """Flip c in/out of the blocked set. Returns True if c is now blocked."""
        if self.is_protected(c) or not self.contains(c):
            return False
        if c in self._blocked:
            self._blocked.remove(c)
            return False
        self._blocked.add(c)
        return True

    def blocked_cells(self) -> FrozenSet[Cell]:
        return frozenset(self._blocked)
