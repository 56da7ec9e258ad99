"""Pause / resume / quit state machine driven by keyboard presses.

Escape and the continue key only act on the frame they go down; holding them
does nothing further.  The quit key is read from its raw down-state while the
session is paused, so it terminates as soon as it is seen held.
"""

from __future__ import annotations

import logging

from dvd_logo.state import KeyState, SessionState

logger = logging.getLogger(__name__)


def pressed_edge(down: bool, was_down: bool) -> bool:
    """Return ``True`` only on the tick a key goes from up to down."""

    return down and not was_down


def next_session_state(state: SessionState, keys: KeyState, previous: KeyState) -> SessionState:
    """Compute the session state after one tick of key input.

    ``previous`` is the key state seen on the tick before, which is what turns
    the raw down-state into single press events.
    """

    if state is SessionState.TERMINATED:
        return state

    if pressed_edge(keys.escape, previous.escape):
        state = SessionState.RUNNING if state is SessionState.PAUSED else SessionState.PAUSED

    # A freshly paused session is checked for continue/quit on the same tick.
    if state is SessionState.PAUSED:
        if keys.quit:
            return SessionState.TERMINATED
        if pressed_edge(keys.continue_, previous.continue_):
            return SessionState.RUNNING

    return state


class SessionController:
    """Owns the session state and the previous-tick key flags."""

    def __init__(self) -> None:
        self.state = SessionState.RUNNING
        self.previous_keys = KeyState()

    @property
    def paused(self) -> bool:
        return self.state is SessionState.PAUSED

    @property
    def terminated(self) -> bool:
        return self.state is SessionState.TERMINATED

    def update(self, keys: KeyState) -> SessionState:
        """Feed one tick of key state and return the resulting session state."""

        new_state = next_session_state(self.state, keys, self.previous_keys)
        self.previous_keys = keys
        if new_state is not self.state:
            logger.info("session %s -> %s", self.state.value, new_state.value)
        self.state = new_state
        return new_state

    def terminate(self) -> SessionState:
        """Force the session to end, e.g. when the window is closed."""

        if not self.terminated:
            logger.info("session %s -> %s", self.state.value, SessionState.TERMINATED.value)
        self.state = SessionState.TERMINATED
        return self.state
