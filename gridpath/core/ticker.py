# gridpath/core/ticker.py
#!/usr/bin/env python3
"""
Per-tick sequencing: drain toggle requests -> recompute path -> publish frame.

The viewer pushes clicked cells with request_toggle() at any time and calls
tick() once per frame. Everything inside tick() runs to completion before it
returns, so the search always sees the grid exactly as left by this tick's
requests.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional

from gridpath.core.bfs import BFSAlgo
from gridpath.core.grid import Grid
from gridpath.core.toggle import ToggleHandler
from gridpath.core.types import Cell, Frame, PlanResult, Request, CLEAR_ALL
from gridpath.log import log_warn

DEFAULT_QUEUE_CAPACITY = 256

Publisher = Callable[[Frame], None]


class ToggleQueue:
    """Bounded FIFO of toggle requests. When full, new cell requests are refused.

    A clear request makes everything queued before it moot, so push_clear()
    replaces the pending items with a single CLEAR_ALL and never hits the bound.
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: Deque[Request] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, c: Cell) -> bool:
        if len(self._items) >= self.capacity:
            log_warn(f"toggle queue full ({self.capacity}), dropping {c}")
            return False
        self._items.append(c)
        return True

    def push_clear(self) -> None:
        self._items.clear()
        self._items.append(CLEAR_ALL)

    def drain(self) -> List[Request]:
        out = list(self._items)
        self._items.clear()
        return out


@dataclass
class WorldState:
    grid: Grid
    result: PlanResult = field(default_factory=lambda: PlanResult(status="idle"))
    tick: int = 0


class TickOrchestrator:
    def __init__(self, grid: Grid, publish: Optional[Publisher] = None,
                 capacity: int = DEFAULT_QUEUE_CAPACITY):
        self.world = WorldState(grid=grid)
        self.queue = ToggleQueue(capacity)
        self.handler = ToggleHandler()
        self.algo = BFSAlgo()
        self.algo.init(grid)
        self._publish = publish
        self._frame: Optional[Frame] = None

    @property
    def grid(self) -> Grid:
        return self.world.grid

    @property
    def frame(self) -> Optional[Frame]:
        return self._frame

    def request_toggle(self, c: Cell) -> bool:
        return self.queue.push(c)

    def request_clear(self) -> None:
        self.queue.push_clear()

    def tick(self) -> Frame:
        # 1) full drain; anything pushed after this point waits for the next tick
        self.handler.apply(self.world.grid, self.queue.drain())

        # 2) fresh search on the grid as the drain left it
        self.world.result = self.algo.solve()
        self.world.tick += 1

        # 3) publish
        frame = Frame(
            tick=self.world.tick,
            size=self.world.grid.size,
            start=self.world.grid.start,
            goal=self.world.grid.goal,
            blocked=self.world.grid.blocked_cells(),
            result=self.world.result,
        )
        self._frame = frame
        if self._publish is not None:
            self._publish(frame)
        return frame
