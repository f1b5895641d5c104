#!/usr/bin/env python3
import argparse, logging
from pathlib import Path

from levelgen.config import LevelConfig, load_config
from levelgen.errors import LevelGenError
from levelgen.mapgen.generator import generate_level
from levelgen.render.image import render_png
from levelgen.render.text import render_text
from levelgen.rng import PMRandom

def build_config(args) -> LevelConfig:
    cfg = load_config(Path(args.config)) if args.config else LevelConfig()
    return cfg.with_overrides(width=args.width, height=args.height, min_separation=args.min_sep)

def cmd_show(args):
    cfg = build_config(args)
    level = generate_level(cfg, PMRandom.from_seed(args.seed))
    print(render_text(level.grid, cfg.tiles))
    print(f"waypoints: {level.waypoints}")

def cmd_png(args):
    cfg = build_config(args)
    level = generate_level(cfg, PMRandom.from_seed(args.seed))
    render_png(level.grid, args.out, tile_size=args.tile, tiles=cfg.tiles, label=args.label)
    print(f"Wrote {args.out}")

def main():
    p = argparse.ArgumentParser(description="Generate side-scrolling road levels")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    def common(sp):
        sp.add_argument('--seed', type=int, default=1)
        sp.add_argument('--config', type=str, help='JSON level config')
        sp.add_argument('--width', type=int)
        sp.add_argument('--height', type=int)
        sp.add_argument('--min-sep', dest='min_sep', type=int)

    p1 = sub.add_parser('show')
    common(p1)
    p1.set_defaults(func=cmd_show)
    p2 = sub.add_parser('png')
    common(p2)
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--tile', type=int, default=16)
    p2.add_argument('--label', action='store_true', help='Draw tile ids')
    p2.set_defaults(func=cmd_png)
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (LevelGenError, FileNotFoundError) as e:
        raise SystemExit(f"error: {e}")

if __name__ == '__main__':
    main()
