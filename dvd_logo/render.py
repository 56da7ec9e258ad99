"""pygame drawing for the screensaver.

The renderer only reads state; it never changes the simulation.  Text
helpers follow the usual pygame pattern of rendering a surface and blitting
it at a rect positioned on the screen.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from dvd_logo import constants
from dvd_logo.assets import LogoAsset
from dvd_logo.state import SessionState, SimulationState


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``HH:MM:SS.hh``; hours are not wrapped."""

    millis = int(seconds * 1000)
    hours = millis // 3_600_000
    minutes = (millis // 60_000) % 60
    secs = (millis // 1000) % 60
    hundredths = (millis % 1000) // 10
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.{hundredths:02d}"


def format_hud_text(state: SimulationState) -> str:
    return f"Hits: {state.corner_hits} | Time: {format_elapsed(state.elapsed)}"


def background_color(state: SimulationState) -> constants.Color:
    """Flash green on the frame a corner is hit, blue otherwise."""

    return constants.CORNER_FLASH if state.hit_corner else constants.BACKGROUND


def pause_menu_rect(
    screen_size: Tuple[int, int] = (constants.SCREEN_WIDTH, constants.SCREEN_HEIGHT),
) -> pygame.Rect:
    """Return the centred rectangle of the pause panel."""

    width, height = screen_size
    return pygame.Rect(
        (width - constants.PAUSE_MENU_WIDTH) // 2,
        (height - constants.PAUSE_MENU_HEIGHT) // 2,
        constants.PAUSE_MENU_WIDTH,
        constants.PAUSE_MENU_HEIGHT,
    )


def render_text(surface: pygame.Surface, font: pygame.font.Font, text: str, pos: Tuple[int, int],
                color: constants.Color = constants.WHITE, center: bool = False) -> pygame.Rect:
    """Draw text onto the surface and return the resulting rectangle."""

    text_surface = font.render(text, True, color)
    text_rect = text_surface.get_rect()
    if center:
        text_rect.center = pos
    else:
        text_rect.topleft = pos
    surface.blit(text_surface, text_rect)
    return text_rect


class PygameRenderer:
    """Draws a frame onto ``surface`` and presents it.

    ``present`` is normally ``pygame.display.flip``; tests pass ``None`` to
    draw onto an off-screen surface only.
    """

    def __init__(self, surface: pygame.Surface, logo: LogoAsset, present=pygame.display.flip,
                 set_caption=pygame.display.set_caption) -> None:
        self.surface = surface
        self.logo = logo
        self.present = present
        self.set_caption = set_caption
        self.hud_font = pygame.font.Font(None, constants.HUD_FONT_SIZE)
        self.menu_font = pygame.font.Font(None, constants.PAUSE_FONT_SIZE)
        self.last_hud: Optional[str] = None

    def draw(self, state: SimulationState, session: SessionState) -> None:
        self.surface.fill(background_color(state))
        self.surface.blit(self.logo.image, (int(state.x), int(state.y)))

        hud = format_hud_text(state)
        render_text(self.surface, self.hud_font, hud, (10, 10))
        if self.set_caption is not None:
            self.set_caption(hud)
        self.last_hud = hud

        if session is SessionState.PAUSED:
            self.draw_pause_menu()

        if self.present is not None:
            self.present()

    def draw_pause_menu(self) -> None:
        """Render the pause panel with its border and the three menu lines."""

        panel = pause_menu_rect(self.surface.get_size())
        pygame.draw.rect(self.surface, constants.PAUSE_PANEL, panel)
        pygame.draw.rect(self.surface, constants.WHITE, panel, constants.PAUSE_BORDER)

        for text, offset in constants.PAUSE_LINES:
            render_text(self.surface, self.menu_font, text, (panel.centerx, panel.top + offset), center=True)
