from __future__ import annotations
import logging
from typing import Iterable

from .level import LevelDescriptor, TOK_FLOOR

logger = logging.getLogger(__name__)


def parse_level_lines(rows: Iterable[str], *, name: str = "", pad: bool = False,
                      solved: bool = False) -> LevelDescriptor:
    """Builds a LevelDescriptor from text rows, top row first.

    With pad=True ragged rows are right-aligned with floor to the widest row
    before validation; otherwise a ragged grid is a MalformedLevelError.
    """
    lines = [row.rstrip("\r\n") for row in rows]
    if pad and lines:
        width = max(len(line) for line in lines)
        if any(len(line) != width for line in lines):
            logger.warning("Padding ragged rows of level %r to width %d", name, width)
            lines = [line.ljust(width, TOK_FLOOR) for line in lines]
    return LevelDescriptor(lines=tuple(lines), name=name, solved=solved)


def parse_level_str(level_str: str, name: str = "") -> LevelDescriptor:
    """Parses an ASCII level in standard notation.

    Supported characters:
      '#': wall
      '.': goal
      '$': box
      '*': box on goal
      '@': player
      '+': player on goal
    Other characters are treated as empty floor. Blank lines are dropped and
    short rows are padded on the right.
    """
    lines = [line for line in level_str.splitlines() if line.strip() != ""]
    return parse_level_lines(lines, name=name, pad=True)


def parse_level_file(path: str) -> LevelDescriptor:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), name=path)
