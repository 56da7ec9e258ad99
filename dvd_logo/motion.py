"""Logo physics: integration, wall bounces, corner detection and pointer nudges.

Every function here is pure.  ``advance`` takes the previous
:class:`~dvd_logo.state.SimulationState` and returns a new one, which keeps
the engine trivial to drive from tests without a window.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Tuple

from dvd_logo import constants
from dvd_logo.state import PointerState, SimulationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhysicsConfig:
    """Geometry and tuning used by :func:`advance`.

    ``logo_height`` has no sensible default because it depends on the aspect
    ratio of the loaded image.
    """

    logo_height: float
    viewport_width: float = constants.SCREEN_WIDTH
    viewport_height: float = constants.SCREEN_HEIGHT
    logo_width: float = constants.LOGO_WIDTH
    max_velocity: float = constants.LOGO_MAX_VELOCITY
    corner_tolerance: float = constants.CORNER_TOLERANCE
    nudge_amount: float = constants.NUDGE_AMOUNT

    @property
    def max_x(self) -> float:
        return self.viewport_width - self.logo_width

    @property
    def max_y(self) -> float:
        return self.viewport_height - self.logo_height


def _bounce_axis(pos: float, vel: float, limit: float) -> Tuple[float, float]:
    # Lower wall is checked before the upper one, as each can fire on its own.
    if pos < 0:
        pos = 0.0
        vel = -vel
    if pos > limit:
        pos = limit
        vel = -vel
    return pos, vel


def resolve_walls(state: SimulationState, config: PhysicsConfig) -> SimulationState:
    """Clamp the logo back inside the viewport and reflect the velocity.

    Axes are independent, so a diagonal move into a true corner flips both
    components in the same tick.
    """

    x, vx = _bounce_axis(state.x, state.vx, config.max_x)
    y, vy = _bounce_axis(state.y, state.vy, config.max_y)
    return replace(state, x=x, y=y, vx=vx, vy=vy)


def is_corner_hit(x: float, y: float, config: PhysicsConfig) -> bool:
    """Return ``True`` when the logo touches one vertical and one horizontal wall."""

    tol = config.corner_tolerance
    near_side = x < tol or x > config.max_x - tol
    near_edge = y < tol or y > config.max_y - tol
    return near_side and near_edge


def clamp_velocity(value: float, limit: float) -> float:
    """Limit ``abs(value)`` to ``limit`` while keeping its sign."""

    if abs(value) > limit:
        return math.copysign(limit, value)
    return value


def apply_nudge(state: SimulationState, pointer: PointerState, config: PhysicsConfig) -> SimulationState:
    """Pull the logo's velocity towards the pointer while the button is held."""

    if not pointer.pressed:
        return state

    px, py = pointer.position
    dx = px - (state.x + config.logo_width / 2)
    dy = py - (state.y + config.logo_height / 2)
    vx = state.vx + dx * config.nudge_amount / 1000
    vy = state.vy + dy * config.nudge_amount / 1000

    # Each component is clamped on its own rather than rescaling the vector.
    return replace(
        state,
        vx=clamp_velocity(vx, config.max_velocity),
        vy=clamp_velocity(vy, config.max_velocity),
    )


def advance(state: SimulationState, pointer: PointerState, config: PhysicsConfig) -> SimulationState:
    """Run one tick of logo physics and return the updated state.

    The steps are: move by one velocity step, bounce off walls, count a corner
    hit, then apply any pointer nudge.  The corner check looks at the position
    after bouncing and runs on every tick, so a logo lingering inside the
    tolerance band keeps scoring.
    """

    moved = replace(state, x=state.x + state.vx, y=state.y + state.vy, hit_corner=False)
    bounced = resolve_walls(moved, config)

    if is_corner_hit(bounced.x, bounced.y, config):
        bounced = replace(bounced, corner_hits=bounced.corner_hits + 1, hit_corner=True)
        logger.debug("corner hit #%d at (%.1f, %.1f)", bounced.corner_hits, bounced.x, bounced.y)

    return apply_nudge(bounced, pointer, config)
