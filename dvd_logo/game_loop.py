"""Per-frame orchestration: input -> session -> physics -> render.

The loop never touches pygame directly.  Input, drawing and wall-clock time
come in through the small protocols below, so tests can script a whole
session with fakes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, Optional, Protocol

from dvd_logo import motion
from dvd_logo.motion import PhysicsConfig
from dvd_logo.session import SessionController
from dvd_logo.state import InputSnapshot, SessionState, SimulationState

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    def poll(self) -> InputSnapshot: ...


class Renderer(Protocol):
    def draw(self, state: SimulationState, session: SessionState) -> None: ...


class Clock(Protocol):
    def elapsed(self) -> float: ...


class WallClock:
    """Seconds elapsed since construction, read from a monotonic timer."""

    def __init__(self, timer: Callable[[], float] = time.monotonic) -> None:
        self._timer = timer
        self._start = timer()

    def elapsed(self) -> float:
        return self._timer() - self._start


class GameLoop:
    """Drives one screensaver session tick by tick.

    Parameters
    ----------
    state:
        Initial logo state.
    config:
        Physics geometry, including the loaded logo's height.
    input_source, renderer, clock:
        Host collaborators.
    """

    def __init__(
        self,
        state: SimulationState,
        config: PhysicsConfig,
        input_source: InputSource,
        renderer: Renderer,
        clock: Clock,
    ) -> None:
        self.state = state
        self.config = config
        self.input_source = input_source
        self.renderer = renderer
        self.clock = clock
        self.session = SessionController()

    def tick(self) -> bool:
        """Advance one frame.  Returns ``False`` once the session has ended."""

        snapshot = self.input_source.poll()

        if snapshot.window_closed:
            session_state = self.session.terminate()
        else:
            session_state = self.session.update(snapshot.keys)

        if session_state is SessionState.TERMINATED:
            return False

        # Time keeps running while paused; only the physics is frozen.
        self.state = replace(self.state, elapsed=self.clock.elapsed())
        if session_state is SessionState.RUNNING:
            self.state = motion.advance(self.state, snapshot.pointer, self.config)

        self.renderer.draw(self.state, session_state)
        return True

    def run(self, frame_limiter: Optional[Callable[[], object]] = None) -> SimulationState:
        """Tick until the session terminates and return the final state.

        ``frame_limiter`` is called after every frame, normally a bound
        ``pygame.time.Clock.tick`` that caps the frame rate.
        """

        while self.tick():
            if frame_limiter is not None:
                frame_limiter()
        logger.info(
            "session ended after %.2fs with %d corner hits",
            self.state.elapsed,
            self.state.corner_hits,
        )
        return self.state
