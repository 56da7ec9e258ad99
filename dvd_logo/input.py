"""Keyboard and mouse polling through pygame."""

from __future__ import annotations

import pygame

from dvd_logo.state import InputSnapshot, KeyState, PointerState

CONTINUE_KEY = pygame.K_c
QUIT_KEY = pygame.K_q


class PygameInputSource:
    """Reads the current key and pointer state once per tick.

    The event queue is drained every poll so the window stays responsive;
    only the close request is taken from it, everything else is read as
    down-state.
    """

    def poll(self) -> InputSnapshot:
        window_closed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                window_closed = True

        keys = pygame.key.get_pressed()
        buttons = pygame.mouse.get_pressed()
        return InputSnapshot(
            keys=KeyState(
                escape=bool(keys[pygame.K_ESCAPE]),
                continue_=bool(keys[CONTINUE_KEY]),
                quit=bool(keys[QUIT_KEY]),
            ),
            pointer=PointerState(position=pygame.mouse.get_pos(), pressed=bool(buttons[0])),
            window_closed=window_closed,
        )
