import os

# Renderer and asset tests need pygame but never a real window.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def headless_pygame():
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()
