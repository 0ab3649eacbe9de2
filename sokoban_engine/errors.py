from __future__ import annotations

__all__ = [
    "SokobanError",
    "MalformedLevelError",
    "IllegalCommandError",
    "LevelPackError",
]


class SokobanError(Exception):
    """Base class for errors raised by the engine."""


class MalformedLevelError(SokobanError, ValueError):
    """A level descriptor is empty, not rectangular, or has != 1 player."""


class IllegalCommandError(SokobanError, ValueError):
    """A command outside the recognized set reached the engine."""


class LevelPackError(SokobanError, ValueError):
    """A level pack cannot be loaded as a whole (empty, unknown format)."""
