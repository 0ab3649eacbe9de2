# --- file: sokoban_engine/levels/resolve.py
from __future__ import annotations
from typing import Tuple

from ..level import LevelDescriptor
from .io import load_pack


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/pack.json#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        k = 0
    return path, k


def load_level_by_id(level_id: str) -> LevelDescriptor:
    """Loads a SPECIFIC level of a pack file, addressed as path#idx."""
    path, wanted = parse_level_id(level_id)
    pack = load_pack(path)
    if wanted < 0 or wanted >= len(pack):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(pack)})")
    return pack.levels[wanted]
