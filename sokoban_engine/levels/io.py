from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple
import json
import logging
import os

from sokoban_engine.errors import LevelPackError, MalformedLevelError
from sokoban_engine.level import LevelDescriptor
from sokoban_engine.parser import parse_level_lines, parse_level_str

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
TEXT_SUFFIXES = (".txt", ".xsb")


@dataclass
class LevelPack:
    name: str
    levels: List[LevelDescriptor]
    difficulty: str = ""
    current: int = 0  # starting index stored with the pack
    path: str = field(default="", compare=False)

    def __len__(self) -> int:
        return len(self.levels)


def _split_on_blank_lines(text: str) -> List[str]:
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith(";"):
            continue
        if line.strip() == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line)
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def _level_from_json(entry: dict, label: str) -> LevelDescriptor:
    try:
        lines = entry["lines"]
    except (KeyError, TypeError):
        raise MalformedLevelError(f"{label}: missing 'lines'") from None
    width = entry.get("width")
    height = entry.get("height")
    if height is not None and height != len(lines):
        raise MalformedLevelError(f"{label}: declared height {height}, found {len(lines)} rows")
    if width is not None:
        if any(len(line) > width for line in lines):
            raise MalformedLevelError(f"{label}: a row is wider than declared width {width}")
        lines = [line.ljust(width) for line in lines]
    return parse_level_lines(lines, name=label, pad=width is None,
                             solved=bool(entry.get("solved", False)))


def load_json_pack(path: str) -> LevelPack:
    """Loads a pack in the game's JSON format.

    {"name", "difficulty", "num_levels", "levels": [{"height", "width", "lines", "solved"}], "current"}
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not isinstance(data.get("levels"), list):
        raise LevelPackError(f"{path}: expected an object with a 'levels' list")
    name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
    entries = data["levels"]
    declared = data.get("num_levels")
    if declared is not None and declared != len(entries):
        raise MalformedLevelError(f"{path}: num_levels is {declared}, found {len(entries)} levels")
    levels = [_level_from_json(entry, f"{name}#{i}") for i, entry in enumerate(entries)]
    return _finish(LevelPack(name=name, levels=levels, difficulty=data.get("difficulty", ""),
                             current=int(data.get("current", 0)), path=path))


def load_txt_pack(path: str) -> LevelPack:
    """Loads a text pack: levels separated by blank lines, ';' lines are comments."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    name = os.path.splitext(os.path.basename(path))[0]
    levels = [parse_level_str(block, name=f"{name}#{i}")
              for i, block in enumerate(_split_on_blank_lines(content))]
    return _finish(LevelPack(name=name, levels=levels, path=path))


def _finish(pack: LevelPack) -> LevelPack:
    if not pack.levels:
        raise LevelPackError(f"No levels found in {pack.path}")
    logger.info("Loaded pack %r: %d levels", pack.name, len(pack.levels))
    return pack


def load_pack(path: str) -> LevelPack:
    suffix = os.path.splitext(path)[1].lower()
    if suffix in JSON_SUFFIXES:
        return load_json_pack(path)
    if suffix in TEXT_SUFFIXES:
        return load_txt_pack(path)
    raise LevelPackError(f"Unsupported level pack format: {path}")


def iterate_pack_files(root_dir: str, rel_dirs: List[str]) -> Iterator[str]:
    """Iterate over all pack files (.json/.txt/.xsb) in the given subfolders, sorted."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            logger.warning("Level directory %s does not exist", abs_dir)
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if fname.lower().endswith(JSON_SUFFIXES + TEXT_SUFFIXES):
                yield os.path.join(abs_dir, fname)


def pack_stats(pack: LevelPack) -> List[Tuple[int, int, int]]:
    """(width, height, boxes) for every level of the pack."""
    return [(lvl.width, lvl.height, lvl.box_count) for lvl in pack.levels]
