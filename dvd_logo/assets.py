"""Loading the logo image that ships inside the package."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from importlib import resources

import pygame

from dvd_logo import constants

logger = logging.getLogger(__name__)

LOGO_RESOURCE = "assets/dvd-logo.png"


class AssetLoadError(RuntimeError):
    """The bundled logo could not be read or decoded."""


@dataclass(frozen=True)
class LogoAsset:
    """The logo scaled to its display size.

    ``height`` keeps the fractional value so physics matches the exact aspect
    ratio; ``image`` is the surface scaled to the nearest whole pixel.
    """

    image: pygame.Surface
    width: float
    height: float


def read_logo_bytes() -> bytes:
    """Return the raw PNG bytes bundled with the package."""

    try:
        return resources.files("dvd_logo").joinpath(LOGO_RESOURCE).read_bytes()
    except OSError as exc:
        raise AssetLoadError(f"cannot read {LOGO_RESOURCE}: {exc}") from exc


def load_logo(data: bytes, width: float = constants.LOGO_WIDTH) -> LogoAsset:
    """Decode ``data`` and scale it to ``width`` keeping its aspect ratio."""

    try:
        source = pygame.image.load(io.BytesIO(data), "dvd-logo.png")
    except pygame.error as exc:
        raise AssetLoadError(f"cannot decode logo image: {exc}") from exc

    src_w, src_h = source.get_size()
    if src_w == 0 or src_h == 0:
        raise AssetLoadError("logo image is empty")

    scale = width / src_w
    height = scale * src_h
    image = pygame.transform.scale(source, (int(round(width)), int(round(height))))
    logger.info("loaded logo %dx%d, drawn at %.0fx%.2f", src_w, src_h, width, height)
    return LogoAsset(image=image, width=width, height=height)
