"""Command-line interface for map generation."""

import argparse
import logging
import time
from pathlib import Path

import structlog


def configure_logging(verbose: bool) -> None:
    """Configure structlog console output."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def build_parser() -> argparse.ArgumentParser:
    from .config import MapSize

    parser = argparse.ArgumentParser(
        description="Generate a procedural hex map and report its terrain"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a map TOML config (see configs/)",
    )
    parser.add_argument(
        "--size",
        type=str,
        choices=[s.value for s in MapSize],
        default=None,
        help="Map size preset (overrides config)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (overrides config)"
    )
    parser.add_argument("--ocean-threshold", type=float, default=None)
    parser.add_argument("--hill-threshold", type=float, default=None)
    parser.add_argument("--mountain-threshold", type=float, default=None)
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the effective config as JSON and exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for map generation."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    logger = structlog.get_logger()

    from pydantic import ValidationError

    from ..config import find_config, load_config
    from .config import MapConfig
    from .generator import generate_map, terrain_counts
    from .validation import validate_map

    try:
        if args.config:
            config_path = find_config(args.config)
            config = load_config(Path(config_path))
            logger.info("config_loaded", path=str(config_path))
        else:
            config = MapConfig()

        # Apply CLI overrides
        overrides = {
            "size": args.size,
            "seed": args.seed,
            "ocean_threshold": args.ocean_threshold,
            "hill_threshold": args.hill_threshold,
            "mountain_threshold": args.mountain_threshold,
        }
        updates = {k: v for k, v in overrides.items() if v is not None}
        if updates:
            config = MapConfig.model_validate({**config.model_dump(), **updates})
    except (FileNotFoundError, ValidationError) as e:
        logger.error("config_error", error=str(e))
        raise SystemExit(1)

    if args.print_config:
        print(config.model_dump_json(indent=2))
        return

    width, height = config.size.dimensions()
    print(f"Generating {config.size.value} map ({width}x{height}) with seed {config.seed}")

    start_time = time.time()
    tiles = generate_map(config)
    gen_time = time.time() - start_time

    print(f"Generation complete in {gen_time:.2f}s")
    print()

    terrains, features = terrain_counts(tiles)
    total = len(tiles)
    print("Terrain:")
    for terrain, count in terrains.most_common():
        print(f"  {terrain.value:<15} {count:>6} ({count / total:.1%})")
    print("Features:")
    for feature, count in features.most_common():
        print(f"  {feature.value:<15} {count:>6} ({count / total:.1%})")

    result = validate_map(tiles, config)
    print(f"Validation: {result.summary()}")
    if not result.passed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
