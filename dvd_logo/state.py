"""Value types shared by the motion engine, session controller and game loop."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SimulationState:
    """Everything the renderer needs to draw the logo for one frame.

    Attributes
    ----------
    x, y: float
        Top-left corner of the logo, origin at the top-left of the viewport.
    vx, vy: float
        Pixels moved per tick on each axis.
    corner_hits: int
        Number of ticks on which the logo sat in a corner.
    elapsed: float
        Wall-clock seconds since the session started.
    hit_corner: bool
        ``True`` only on a tick where a corner hit was counted.
    """

    x: float
    y: float
    vx: float
    vy: float
    corner_hits: int = 0
    elapsed: float = 0.0
    hit_corner: bool = False


class SessionState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class KeyState:
    """Down-state of the keys the session controller listens to."""

    escape: bool = False
    continue_: bool = False
    quit: bool = False


@dataclass(frozen=True)
class PointerState:
    position: Tuple[float, float] = (0.0, 0.0)
    pressed: bool = False


@dataclass(frozen=True)
class InputSnapshot:
    """One tick's worth of polled input.

    ``window_closed`` is set when the host window asked to close, which ends
    the session regardless of whether it is paused.
    """

    keys: KeyState = KeyState()
    pointer: PointerState = PointerState()
    window_closed: bool = False
