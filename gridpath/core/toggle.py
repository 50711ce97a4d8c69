# gridpath/core/toggle.py
#!/usr/bin/env python3
"""
Obstacle toggle handler.

Applies a batch of toggle requests to a Grid, one at a time, in arrival order.
Out-of-bounds cells and the two endpoints are dropped without raising; the only
observable effect of a batch is the grid's blocked set afterwards.

A CLEAR_ALL request toggles off whatever is blocked at its place in the batch.
"""

from dataclasses import dataclass
from typing import Iterable

from gridpath.core.grid import Grid
from gridpath.core.types import Request, CLEAR_ALL
from gridpath.log import log_debug


@dataclass
class ToggleHandler:
    accepted: int = 0
    dropped: int = 0

    def apply(self, grid: Grid, requests: Iterable[Request]) -> None:
        for c in requests:
            if c == CLEAR_ALL:
                cleared = sorted(grid.blocked_cells())
                for b in cleared:
                    grid.toggle(b)
                self.accepted += len(cleared)
                log_debug(f"clear: {len(cleared)} cells freed")
                continue
            if not grid.contains(c):
                self.dropped += 1
                log_debug(f"toggle {c} dropped: out of bounds")
                continue
            if grid.is_protected(c):
                self.dropped += 1
                log_debug(f"toggle {c} dropped: endpoint")
                continue
            now_blocked = grid.toggle(c)
            self.accepted += 1
            log_debug(f"toggle {c} -> {'blocked' if now_blocked else 'free'}")
