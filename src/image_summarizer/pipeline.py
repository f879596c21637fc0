"""Top-level orchestration: discover, sample, load, compose, encode."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import image_summarizer.discovery as is_discovery
import image_summarizer.image_io as is_image_io
import image_summarizer.random_utils as is_random
import image_summarizer.runtime as is_runtime
import image_summarizer.sampler as is_sampler
from image_summarizer.collage import (
    compose_collage,
    resolve_output_format,
    save_collage,
)
from image_summarizer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    import numpy as np

    from image_summarizer.config import CollageConfig


def build_collage(
    config: CollageConfig,
    rng: np.random.Generator | None = None,
) -> Path:
    """
    Run the whole pipeline for ``config`` and return the written path.

    The output format and layout are validated before the directory is
    scanned, so a bad ``-out`` or ``-n`` fails without decoding anything.
    Every stage raises a ``CollageError`` subclass on failure.
    """
    input_dir = is_runtime.validate_input_dir(config.input.dir)
    is_runtime.validate_layout_parameters(
        config.layout.grid_size, config.layout.tile_size,
    )
    out_path = Path(config.output.out)
    fmt = resolve_output_format(out_path)
    layout = config.collage_layout()

    logger.info("Input directory: %s", input_dir)
    logger.info("Output: %s (%s)", out_path, fmt)
    logger.info("Grid: %dx%d, tile %dpx", layout.grid_size, layout.grid_size,
                layout.tile)

    files = is_discovery.find_image_files(input_dir)
    generator = rng or is_random.resolve_rng(config.sampling.seed)
    selected = is_sampler.select_random(files, layout.cell_count, generator)
    selected.sort(key=str)

    images = is_image_io.load_images(selected)
    logger.info("Loaded %d image(s)", len(images))

    canvas = compose_collage(images, layout, config.caption_style())
    return save_collage(canvas, out_path)
