import argparse
import json
import logging
import sys

from hexworld import Biome, Coordinate, TerrainConfig, UnknownDirectionError, Viewport
from hexworld.config import GRID_RADIUS
import render


def parse_coordinate(text: str) -> Coordinate:
    try:
        q, r = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected Q,R, got {text!r}") from None
    return Coordinate(q, r)


def load_config(args) -> TerrainConfig:
    data = {}
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            data = json.load(f)
    for key in ("seed", "humidity_scale", "humidity_bias"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value
    return TerrainConfig.from_dict(data)


def make_viewport(args) -> Viewport:
    return Viewport(load_config(args), center=args.center, radius=args.radius)


def summary(vp: Viewport) -> str:
    lines = [f"center=({vp.center.q},{vp.center.r}) radius={vp.radius} "
             f"hexagons={len(vp.grid)} seed={vp.config.seed} "
             f"humidity_scale={vp.config.humidity_scale:.2f} humidity_bias={vp.config.humidity_bias:.2f}"]
    biomes = vp.grid.biome_counts()
    for b in Biome:
        if biomes[b]:
            lines.append(f"  {b.name.lower():<14} {biomes[b]}")
    bands = vp.grid.band_counts()
    lines.append("  bands: " + " ".join(f"{k}:{bands[k]}" for k in sorted(bands)))
    return "\n".join(lines)


def cmd_summary(args):
    vp = make_viewport(args)
    print(summary(vp))


def cmd_preview(args):
    vp = make_viewport(args)
    img = render.render_grid(vp.grid, vp.center, vp.config.hex_pixel_size, scale=args.scale)
    img.save(args.out)
    print(f"Saved {args.out}")


def cmd_pan(args):
    vp = make_viewport(args)
    for direction in args.directions:
        stats = vp.pan(direction)
        print(f"{direction:<5} -> ({vp.center.q},{vp.center.r}) "
              f"reused={stats.reused} created={stats.created} dropped={stats.dropped}")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=None)
    common.add_argument("--humidity-scale", type=float, default=None)
    common.add_argument("--humidity-bias", type=float, default=None)
    common.add_argument("--config", default=None, help="JSON file with TerrainConfig fields")
    common.add_argument("--center", type=parse_coordinate, default=Coordinate(0, 0), metavar="Q,R",
                        help="view center; write negative values as --center=-1,2")
    common.add_argument("--radius", type=int, default=GRID_RADIUS)
    common.add_argument("-v", "--verbose", action="count", default=0)

    ap = argparse.ArgumentParser(description="Procedural hex world viewport tools")
    sub = ap.add_subparsers(dest="command")

    ap_sum = sub.add_parser("summary", parents=[common], help="Print biome and band counts")
    ap_sum.set_defaults(func=cmd_summary)

    ap_prev = sub.add_parser("preview", parents=[common], help="Render the viewport to a PNG image")
    ap_prev.add_argument("--out", default="preview.png")
    ap_prev.add_argument("--scale", type=int, default=1)
    ap_prev.set_defaults(func=cmd_preview)

    ap_pan = sub.add_parser("pan", parents=[common], help="Pan the viewport and report cell reuse")
    ap_pan.add_argument("directions", nargs="+", help="left|right|up|down")
    ap_pan.set_defaults(func=cmd_pan)
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not hasattr(args, "func"):
        ap.print_help()
        return 1
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (ValueError, UnknownDirectionError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
