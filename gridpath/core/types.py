# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, FrozenSet, Union

Cell = Tuple[int, int]  # (x, y) == (col, row)

# queued alongside cells: unblock everything blocked at that point in the queue
CLEAR_ALL = "clear_all"
Request = Union[Cell, str]

# north, south, west, east; order decides ties between equal-length paths
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

DONE = "done"
NO_PATH = "no_path"


@dataclass
class PlanResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == DONE and self.path is not None


@dataclass(frozen=True)
class Frame:
    """Everything the renderer gets after one tick."""
    tick: int
    size: int
    start: Cell
    goal: Cell
    blocked: FrozenSet[Cell]
    result: PlanResult

    def is_blocked(self, c: Cell) -> bool:
        return c in self.blocked

    @property
    def path(self) -> Optional[List[Cell]]:
        return self.result.path
