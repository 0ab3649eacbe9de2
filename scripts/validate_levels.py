from __future__ import annotations
import argparse, yaml
from tqdm import tqdm

from sokoban_engine.errors import SokobanError
from sokoban_engine.levels.io import iterate_pack_files, load_pack, pack_stats


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/data.yaml")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["levels"]["root_dir"]
    rels = cfg["levels"]["sources"]

    ok = 0
    bad = 0
    levels = 0
    for path in tqdm(list(iterate_pack_files(root, rels)), desc="packs"):
        try:
            pack = load_pack(path)
        except (OSError, ValueError, SokobanError) as e:
            bad += 1
            tqdm.write(f"[skip] {path}: {e}")
            continue
        ok += 1
        levels += len(pack)
        widest = max(w for w, _, _ in pack_stats(pack))
        most_boxes = max(b for _, _, b in pack_stats(pack))
        tqdm.write(f"[ok] {path}: {len(pack)} levels, max width {widest}, max boxes {most_boxes}")
    print(f"valid packs: {ok} ({levels} levels), skipped: {bad}")

if __name__ == "__main__":
    main()
