# gridpath/config.py
#!/usr/bin/env python3
"""
gridpath configuration

Resolved once at startup. Environment variables first, then ``--name=value``
command-line flags override them:

    GRIDPATH_SIZE   / --size=N    grid dimension (default 10)
    GRIDPATH_FPS    / --fps=N     ticks per second (default 60)
    GRIDPATH_QUEUE  / --queue=N   toggle queue capacity (default 256)
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

DEFAULT_SIZE = 10
DEFAULT_FPS = 60
DEFAULT_QUEUE = 256

# window settings belong to the viewer only
WINDOW_TITLE = "Pathfinding"
WINDOW_W = 800
WINDOW_H = 600

_ENV_KEYS = {
    "size": "GRIDPATH_SIZE",
    "fps": "GRIDPATH_FPS",
    "queue": "GRIDPATH_QUEUE",
}


@dataclass(frozen=True)
class Config:
    size: int = DEFAULT_SIZE
    fps: int = DEFAULT_FPS
    queue_capacity: int = DEFAULT_QUEUE

    def display(self) -> str:
        lines = [
            "gridpath configuration:",
            f"  Grid size: {self.size}x{self.size}",
            f"  Ticks/sec: {self.fps}",
            f"  Queue capacity: {self.queue_capacity}",
        ]
        return "\n".join(lines)


def _positive_int(name: str, raw: str) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if v < 1:
        raise ValueError(f"{name} must be >= 1, got {v}")
    return v


def load_config(argv: Optional[Sequence[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> Config:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw = {
        "size": str(DEFAULT_SIZE),
        "fps": str(DEFAULT_FPS),
        "queue": str(DEFAULT_QUEUE),
    }
    for key, env_name in _ENV_KEYS.items():
        if environ.get(env_name):
            raw[key] = environ[env_name]
    for arg in argv:
        for key in raw:
            if arg.startswith(f"--{key}="):
                raw[key] = arg.split("=", 1)[1]

    return Config(
        size=_positive_int("size", raw["size"]),
        fps=_positive_int("fps", raw["fps"]),
        queue_capacity=_positive_int("queue", raw["queue"]),
    )
