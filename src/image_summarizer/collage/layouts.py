"""Grid geometry and collage composition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from image_summarizer.collage.core import (
    CaptionStyle,
    draw_caption,
    make_canvas,
    paste_centered,
    resize_to_tile,
)
from image_summarizer.constants import (
    CAPTION_HEIGHT_PX,
    COLOR_MODE_RGB,
    MARGIN_PX,
)
from image_summarizer.errors import ConfigurationError
from image_summarizer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from image_summarizer.image_io import LoadedImage


@dataclass(frozen=True)
class CollageLayout:
    """
    Geometry of an N x N collage.

    Every cell is ``tile`` pixels square with a caption strip below it;
    ``margin`` separates cells from each other and from the canvas edge.
    """

    grid_size: int
    tile: int
    margin: int = MARGIN_PX
    caption_height: int = CAPTION_HEIGHT_PX

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            msg = f"Grid size must be positive, got {self.grid_size}"
            raise ConfigurationError(msg)
        if self.tile <= 0:
            msg = f"Tile size must be positive, got {self.tile}"
            raise ConfigurationError(msg)

    @property
    def cell_count(self) -> int:
        """Number of tiles in the grid."""
        return self.grid_size * self.grid_size

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Return (width, height) of the full collage."""
        n = self.grid_size
        width = n * self.tile + (n + 1) * self.margin
        height = n * (self.tile + self.caption_height) + (n + 1) * self.margin
        return width, height

    def cell_position(self, index: int) -> tuple[int, int]:
        """Return (row, col) of the cell at ``index`` in row-major order."""
        return divmod(index, self.grid_size)

    def cell_origin(self, index: int) -> tuple[int, int]:
        """Top-left pixel of the image area of cell ``index``."""
        row, col = self.cell_position(index)
        x = self.margin + col * (self.tile + self.margin)
        y = self.margin + row * (self.tile + self.caption_height + self.margin)
        return x, y


def compose_collage(
    images: Sequence[LoadedImage],
    layout: CollageLayout,
    style: CaptionStyle | None = None,
) -> Image.Image:
    """
    Place each image in its grid cell and caption it with its name.

    Images fill cells in the given order, row by row. Each one is
    resized to fit the tile, centered, blended over the background, and
    labelled ``style.gap_px`` pixels below the tile.
    """
    if len(images) > layout.cell_count:
        msg = (f"Got {len(images)} images for a grid of "
               f"{layout.cell_count} cells")
        raise ConfigurationError(msg)

    style = style or CaptionStyle()
    canvas = make_canvas(layout.canvas_size, style.background)

    for i, item in enumerate(images):
        x, y = layout.cell_origin(i)
        resized = resize_to_tile(item.image, layout.tile)
        paste_centered(canvas, resized, (x, y), layout.tile)
        draw_caption(canvas, (x, y + layout.tile + style.gap_px),
                     item.name, style)
        logger.debug("Placed %s at cell %s", item.name,
                     layout.cell_position(i))

    return canvas.convert(COLOR_MODE_RGB)
