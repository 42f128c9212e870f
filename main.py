import argparse
import sys

from engine.seed_generator import generate_seeds, make_rng
from engine.rasterizer import render
from engine.nearest_seed import EmptySeedSetError
from utils.image_io import OutputError
from visualization.save_outputs import save_all_outputs

from config import (
    Config,
    ConfigError,
    DEFAULT_OUTPUT,
    DEFAULT_SEED_COUNT,
    DEFAULT_SIZE,
    MAX_WORKERS,
    parse_count,
    parse_size,
    parse_workers,
)


def _argtype(parser_fn):
    """Adapts a config parser so argparse reports ConfigError as a usage error."""
    def convert(text):
        try:
            return parser_fn(text)
        except ConfigError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None
    convert.__name__ = parser_fn.__name__
    return convert


def build_parser(prog: str = None) -> argparse.ArgumentParser:
    prog = prog or "voronoi-raster"
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Render a randomly seeded Voronoi diagram to an image.",
        epilog=(
            f"Example: {prog} -s 256,256 -c 20 out.png\t"
            "Outputs a 256x256 image as out.png with 20 seeds."
        ),
    )
    parser.add_argument(
        "-s", "--size",
        type=_argtype(parse_size),
        default=DEFAULT_SIZE,
        metavar="W,H",
        help=f"image output size (default {DEFAULT_SIZE[0]},{DEFAULT_SIZE[1]})",
    )
    parser.add_argument(
        "-c", "--count",
        type=_argtype(parse_count),
        default=DEFAULT_SEED_COUNT,
        metavar="N",
        help=f"seed count (default {DEFAULT_SEED_COUNT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for reproducibility (default: random)",
    )
    parser.add_argument(
        "-j", "--workers",
        type=_argtype(parse_workers),
        default=MAX_WORKERS,
        metavar="N",
        help=f"render threads (default {MAX_WORKERS})",
    )
    parser.add_argument(
        "--mark-seeds",
        action="store_true",
        help="also write <output>_seeds.<ext> with the seed sites drawn",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=DEFAULT_OUTPUT,
        help=f"output path (default {DEFAULT_OUTPUT})",
    )
    return parser


def parse_args(argv=None, prog: str = None) -> Config:
    """
    Parses command-line arguments into a Config.
    -h/--help prints usage and exits with status 0.
    """
    args = build_parser(prog).parse_args(argv)
    width, height = args.size
    return Config(
        seed_count=args.count,
        width=width,
        height=height,
        output=args.output,
        rng_seed=args.seed,
        workers=args.workers,
        mark_seeds=args.mark_seeds,
    )


def run(config: Config):
    """
    Runs the complete pipeline for one configuration:
      1. Seed generation (explicit RNG)
      2. Voronoi raster fill
      3. Save outputs
    """
    print(
        f"\n=== Rendering {config.seed_count}-seed voronoi "
        f"at {config.width}x{config.height} ==="
    )

    rng = make_rng(config.rng_seed)
    seeds = generate_seeds(config.seed_count, rng)

    buffer = render(seeds, config.width, config.height, workers=config.workers)

    written = save_all_outputs(
        output=config.output,
        buffer=buffer,
        seeds=seeds,
        mark_seeds=config.mark_seeds,
    )

    print(
        f"[OK] Wrote {config.seed_count}-seed voronoi to "
        f"{config.width}x{config.height} {config.output}"
    )
    for extra in written[1:]:
        print(f"[OK] Wrote seed overlay to {extra}")

    return buffer


def main(argv=None):
    """
    Main entry point:
      - Parses arguments
      - Renders the diagram
      - Saves output files
    Returns the process exit status.
    """
    config = parse_args(argv)

    try:
        run(config)
    except (EmptySeedSetError, OutputError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
