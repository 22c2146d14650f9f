"""Typing speed meter, focus-period timer and keyboard sound effects."""

__version__ = "0.0.1"