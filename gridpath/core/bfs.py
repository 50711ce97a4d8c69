# gridpath/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search over the 4-connected grid, one dequeue per step().

Same Algorithm API as the viewer's steppers:
- init(grid) - reset() - step() -> PlanResult
plus solve(), which resets and steps to the end in one call.

Neighbors are tried north, south, west, east. Parents are recorded when a cell
is first discovered and the goal test happens on dequeue, so the first time the
goal comes off the queue its parent chain is a shortest path.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Set

from gridpath.core.grid import Grid
from gridpath.core.types import Cell, PlanResult, NEIGHBOR_OFFSETS, DONE, NO_PATH


@dataclass
class BFSAlgo:
    name: str = "BFS"

    grid: Optional[Grid] = None
    frontier: Deque[Cell] = field(default_factory=deque)
    discovered: Set[Cell] = field(default_factory=set)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the start cell."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.discovered.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False

        s = self.grid.start
        self.frontier.append(s)
        self.discovered.add(s)

    # -------------------- helpers --------------------

    def _neighbors4(self, c: Cell) -> List[Cell]:
        x, y = c
        out: List[Cell] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            n = (x + dx, y + dy)
            if self.grid.contains(n) and not self.grid.is_blocked(n):
                out.append(n)
        return out

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        path: List[Cell] = [end]
        cur = end
        while cur != self.grid.start:
            cur = self.parent[cur]
            path.append(cur)
        path.reverse()
        return path

    # -------------------- stepping --------------------

    def step(self) -> PlanResult:
        if self.grid is None:
            return PlanResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.grid.goal)
            return PlanResult(status=DONE, path=path, metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return PlanResult(status=NO_PATH, metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            return PlanResult(status=NO_PATH, metrics=self._metrics())

        u = self.frontier.popleft()
        self.popped_count += 1

        if u == self.grid.goal:
            self.done = True
            path = self._reconstruct_path(u)
            return PlanResult(status=DONE, current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        for v in self._neighbors4(u):
            if v in self.discovered:
                continue
            self.discovered.add(v)
            self.parent[v] = u
            self.frontier.append(v)

        return PlanResult(status="running", current=u, metrics=self._metrics())

    def solve(self) -> PlanResult:
        """Fresh full search on the current grid."""
        self.reset()
        while True:
            res = self.step()
            if res.status in (DONE, NO_PATH, "idle"):
                return res

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "visited": len(self.discovered),
            "path_len": path_len,
        }


def shortest_path(grid: Grid) -> Optional[List[Cell]]:
    """Start->goal cells inclusive, or None when the goal can't be reached."""
    algo = BFSAlgo()
    algo.init(grid)
    return algo.solve().path
