"""CLI for sampling Fracnoise generators at a single point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .base import NoiseFn
from .constant import Constant
from .fractal import FractalParams, HybridMulti
from .perlin import Perlin

logger = logging.getLogger(__name__)


def _generators() -> List[str]:
    return [
        "perlin",
        "hybrid",
        "constant",
    ]


def build_generator(args: argparse.Namespace) -> NoiseFn:
    if args.generator == "perlin":
        return Perlin(args.seed)
    if args.generator == "hybrid":
        return HybridMulti(FractalParams(
            seed=args.seed,
            octaves=args.octaves,
            frequency=args.frequency,
            lacunarity=args.lacunarity,
            persistence=args.persistence,
        ))
    return Constant(args.value)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Fracnoise CLI")
    parser.add_argument("generator", nargs="?", help="Generator name")
    parser.add_argument("coords", nargs="*", type=float, help="Point coordinates (2 to 4 values)")
    parser.add_argument("--list", action="store_true", help="List available generators")
    parser.add_argument("--seed", type=int, default=HybridMulti.DEFAULT_SEED)
    parser.add_argument("--octaves", type=int, default=HybridMulti.DEFAULT_OCTAVES)
    parser.add_argument("--frequency", type=float, default=HybridMulti.DEFAULT_FREQUENCY)
    parser.add_argument("--lacunarity", type=float, default=HybridMulti.DEFAULT_LACUNARITY)
    parser.add_argument("--persistence", type=float, default=HybridMulti.DEFAULT_PERSISTENCE)
    parser.add_argument("--value", type=float, default=0.0, help="Output of the constant generator")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.list or not args.generator:
        print("Available generators:")
        for name in _generators():
            print(f"  - {name}")
        return

    if args.generator not in _generators():
        print(f"Unknown generator '{args.generator}'. Use --list to see options.")
        sys.exit(1)

    if len(args.coords) not in (2, 3, 4):
        parser.error(f"expected 2, 3 or 4 coordinates, got {len(args.coords)}")

    generator = build_generator(args)
    logger.debug("Sampling %r at %s", generator, args.coords)
    print(repr(generator.get(args.coords)))


if __name__ == "__main__":
    main()
