"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

import image_summarizer.config as is_config
import image_summarizer.pipeline as is_pipeline
from image_summarizer.config_defaults import (
    DEFAULT_CAPTION_FONT,
    DEFAULT_CAPTION_FONT_PX,
    DEFAULT_GRID_SIZE,
    DEFAULT_OUTPUT,
    DEFAULT_TILE_SIZE,
)
from image_summarizer.errors import CollageError, ConfigurationError
from image_summarizer.logging_utils import logger, set_verbosity
from image_summarizer.runtime import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

EXIT_OK = 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="image-summarizer",
        description=(
            "Randomly pick n x n images from a directory and arrange them "
            "into a captioned collage."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog=(
            "Examples:\n"
            "image-summarizer -dir ./images\n"
            "image-summarizer -dir ./images -out summary.jpg -n 4 -tile 200\n"
            "image-summarizer -dir ./images --seed 7\n\n"
            "Note:\n"
            "  The output extension selects the encoder "
            "(.png, .jpg or .jpeg)."
        ),
    )

    required = p.add_argument_group("required arguments")
    required.add_argument(
        "-dir", "--dir", type=str,
        help="Input directory containing images")

    output = p.add_argument_group("output")
    output.add_argument(
        "-out", "--out", type=str,
        help=f"Output file name, png or jpg (default: {DEFAULT_OUTPUT})",
        default=argparse.SUPPRESS)

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "-n", "--n", type=int,
        help=("Number of images per row/column, n x n collage "
              f"(default: {DEFAULT_GRID_SIZE})"),
        default=argparse.SUPPRESS)
    layout.add_argument(
        "-tile", "--tile", type=int,
        help=("Tile size, width/height in pixels of each cell "
              f"(default: {DEFAULT_TILE_SIZE})"),
        default=argparse.SUPPRESS)

    caption = p.add_argument_group("captions")
    caption.add_argument(
        "--font", type=str,
        help=("TrueType font file or name for captions "
              f"(default: {DEFAULT_CAPTION_FONT})"),
        default=argparse.SUPPRESS)
    caption.add_argument(
        "--font-size", type=int,
        help=f"Caption font size in pixels (default: "
             f"{DEFAULT_CAPTION_FONT_PX})",
        default=argparse.SUPPRESS)

    sampling = p.add_argument_group("sampling")
    sampling.add_argument(
        "--seed", type=int,
        help="Random seed for a reproducible selection",
        default=argparse.SUPPRESS)

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a collage")

    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log per-image progress (DEBUG level)")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    return p


def log_parameters(
    cfg: is_config.CollageConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective settings for this run."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Tile Size: %d", cfg.layout.tile_size)
    logger.info("Caption Font: %s (%dpx)", cfg.caption.font,
                cfg.caption.font_px)
    if cfg.sampling.seed is None:
        logger.info("Random Seed: (none)")
    else:
        logger.info("Random Seed: %d", cfg.sampling.seed)


def run_from_args(args: argparse.Namespace) -> Path | None:
    """
    Build the collage described by parsed command-line arguments.

    Returns None when only validating a config file.
    """
    base_cfg: is_config.CollageConfig | None = None
    if args.config:
        try:
            base_cfg = is_config.ConfigLoader.load(args.config)
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return None

    cfg = is_config.build_config_from_cli(vars(args), base_config=base_cfg)
    log_parameters(cfg, args)
    return is_pipeline.build_collage(cfg)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface and return the process exit code."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.config and not args.dir:
        arg_parser.error("Please specify a directory with -dir")

    set_verbosity(verbose=args.verbose)
    try:
        saved = run_from_args(args)
    except CollageError as exc:
        logger.error("%s", exc)
        return exc.exit_code

    if saved is not None:
        print(f"Saved collage image to {saved}")  # noqa: T201
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
