from __future__ import annotations
import argparse

from sokoban_engine.geometry import Direction
from sokoban_engine.goal_check import snapshot_is_solved
from sokoban_engine.levels.resolve import load_level_by_id
from sokoban_engine.render import render_ascii, status_line
from sokoban_engine.session import Session


def main():
    p = argparse.ArgumentParser(description="Replay a LURD move string on one level.")
    p.add_argument("level_id", help="Level id like 'path/to/pack.json#idx'.")
    p.add_argument("moves", help="LURD string, e.g. 'rrUl' (case is ignored).")
    p.add_argument("--quiet", action="store_true", help="Only print the final board.")
    args = p.parse_args()

    level = load_level_by_id(args.level_id)
    # single-level session: a win clamps back onto the same level
    session = Session([level])
    print(f"-- start --\n{render_ascii(session.board)}")

    for i, ch in enumerate(args.moves):
        before = session.snapshot()
        result = session.move(Direction.from_lurd(ch))
        if result.solved:
            print(f"\nSolved after {i + 1} inputs, {before.move_count + 1} moves.")
            return
        if not args.quiet:
            note = " (blocked)" if result.outcome.rejected else ""
            print(f"\n-- step {i + 1}: {ch}{note} --\n{render_ascii(session.board)}")

    snap = session.snapshot()
    print(f"\n-- final --\n{render_ascii(snap.board)}\n{status_line(snap)}")
    print("Solved:", snapshot_is_solved(snap.board))


if __name__ == "__main__":
    main()
