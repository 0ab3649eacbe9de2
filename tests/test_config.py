import os

import pytest

from sokoban_engine.config import PlayConfig, load_play_config
from sokoban_engine.errors import IllegalCommandError
from sokoban_engine.session import Command

CONFIG = os.path.join(os.path.dirname(__file__), "..", "configs", "play.yaml")


def test_shipped_config():
    cfg = load_play_config(CONFIG)
    assert cfg.pack.endswith("easy.json")
    assert cfg.decode("w") is Command.UP
    assert cfg.decode("n") is Command.NEXT_LEVEL
    assert cfg.log_level == "WARNING"


def test_defaults_and_overrides(tmp_path):
    path = tmp_path / "play.yaml"
    path.write_text("keymap:\n  x: restart\nlog_level: debug\n", encoding="utf-8")
    cfg = load_play_config(str(path))
    assert cfg.decode("x") is Command.RESTART
    assert cfg.decode("b") is Command.PREVIOUS_LEVEL
    assert cfg.log_level == "DEBUG"
    assert cfg.pack == PlayConfig().pack


def test_unknown_command_name(tmp_path):
    path = tmp_path / "play.yaml"
    path.write_text("play:\n  keymap:\n    x: fly\n", encoding="utf-8")
    with pytest.raises(IllegalCommandError):
        load_play_config(str(path))


def test_unbound_key():
    with pytest.raises(IllegalCommandError):
        PlayConfig().decode("z")
