"""Fixed configuration for the bouncing logo screensaver.

Everything that tunes how the logo moves or how a frame looks lives here so
the physics, session and rendering modules can share one set of numbers.
None of these values are editable while the program runs.
"""

from __future__ import annotations

from typing import Tuple

# ---------------------------------------------------------------------------
# Viewport and timing
# ---------------------------------------------------------------------------
SCREEN_WIDTH, SCREEN_HEIGHT = 800, 600
FPS = 60
WINDOW_TITLE = "DVD Logo Bouncer"

# ---------------------------------------------------------------------------
# Logo physics
# ---------------------------------------------------------------------------
# The logo is always drawn this wide; its height follows the source image's
# aspect ratio and is only known once the asset has been loaded.
LOGO_WIDTH = 120
LOGO_START_VELOCITY = 2
LOGO_MAX_VELOCITY = 3

# Distance (in pixels) from a wall that still counts as "touching" it when
# deciding whether the logo reached a corner.
CORNER_TOLERANCE = 5

# Pointer pull strength.  The velocity change per tick is
# ``distance * NUDGE_AMOUNT / 1000`` on each axis.
NUDGE_AMOUNT = 0.5

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------
Color = Tuple[int, int, int]

BACKGROUND = (0, 0, 255)
CORNER_FLASH = (0, 255, 0)
WHITE = (255, 255, 255)
PAUSE_PANEL = (0, 0, 128)

# ---------------------------------------------------------------------------
# Pause menu layout
# ---------------------------------------------------------------------------
PAUSE_MENU_WIDTH, PAUSE_MENU_HEIGHT = 300, 200
PAUSE_BORDER = 2
PAUSE_FONT_SIZE = 22
HUD_FONT_SIZE = 24

# (text, vertical offset from the top of the panel)
PAUSE_LINES = (
    ("PAUSED", 50),
    ("[C]ontinue", 100),
    ("[Q]uit", 150),
)
