from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from .errors import IllegalCommandError
from .session import Command

# R/N/B are the in-game shortcuts for restart, next and previous level
DEFAULT_KEYMAP: Dict[str, str] = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
    "k": "up",
    "h": "left",
    "j": "down",
    "l": "right",
    "r": "restart",
    "n": "next_level",
    "b": "previous_level",
}


@dataclass
class PlayConfig:
    pack: str = "levels/examples/easy.json"
    start_level: int = 0
    log_level: str = "WARNING"
    keymap: Dict[str, Command] = field(
        default_factory=lambda: {k: Command.parse(v) for k, v in DEFAULT_KEYMAP.items()})

    def decode(self, key: str) -> Command:
        """Key press -> Command. Unmapped keys are IllegalCommandError."""
        try:
            return self.keymap[key]
        except KeyError:
            raise IllegalCommandError(f"Key {key!r} is not bound to a command") from None


def play_config_from_dict(cfg: Dict[str, Any]) -> PlayConfig:
    keys = dict(DEFAULT_KEYMAP)
    keys.update(cfg.get("keymap") or {})
    return PlayConfig(
        pack=cfg.get("pack", PlayConfig.pack),
        start_level=int(cfg.get("start_level", 0)),
        log_level=str(cfg.get("log_level", "WARNING")).upper(),
        keymap={str(k): Command.parse(v) for k, v in keys.items()},
    )


def load_play_config(path: str) -> PlayConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    return play_config_from_dict(cfg.get("play", cfg))
