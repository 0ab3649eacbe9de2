from __future__ import annotations
import argparse
import logging
import sys

from sokoban_engine.config import load_play_config
from sokoban_engine.errors import IllegalCommandError, SokobanError
from sokoban_engine.levels.io import load_pack
from sokoban_engine.render import render_ascii, status_line
from sokoban_engine.session import Session


def draw(session: Session) -> None:
    snap = session.snapshot()
    print(f"\n== {snap.level_name} ==")
    print(render_ascii(snap.board))
    print(status_line(snap))


def main():
    p = argparse.ArgumentParser(description="Play a level pack in the terminal.")
    p.add_argument("--config", type=str, default="configs/play.yaml")
    p.add_argument("--pack", type=str, default=None, help="Level pack (.json/.txt), overrides config.")
    p.add_argument("--level", type=int, default=None, help="1-based starting level.")
    args = p.parse_args()

    try:
        cfg = load_play_config(args.config)
        logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
        pack = load_pack(args.pack or cfg.pack)
    except (OSError, SokobanError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.level is not None:
        start = args.level - 1
    else:
        start = cfg.start_level or pack.current
    session = Session(pack.levels, current=start)
    keys = ", ".join(f"{k}={c.value}" for k, c in sorted(cfg.keymap.items()))
    print(f"Pack {pack.name!r}: {len(pack)} levels. Keys: {keys}, q=quit")
    draw(session)

    # one line of input may carry several key presses, processed in order
    for line in sys.stdin:
        for key in line.strip():
            if key == "q":
                return
            try:
                result = session.handle(cfg.decode(key))
            except IllegalCommandError as e:
                print(e)
                continue
            if result.solved:
                print(f"Solved! ({len(session.solved)}/{len(session.levels)} levels solved)")
        draw(session)


if __name__ == "__main__":
    main()
