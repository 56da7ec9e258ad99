"""Bouncing DVD logo screensaver built on pygame."""

__version__ = "0.1.0"
