"""Core rendering primitives for building image collages."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from image_summarizer.config_defaults import (
    DEFAULT_CAPTION_FONT,
    DEFAULT_CAPTION_FONT_PX,
)
from image_summarizer.constants import (
    CAPTION_GAP_PX,
    COLOR_BLACK,
    COLOR_MODE_RGBA,
    COLOR_WHITE,
)
from image_summarizer.logging_utils import logger

_RGB = tuple[int, int, int]


@dataclass(frozen=True)
class CaptionStyle:
    """Appearance configuration shared by every tile of a collage."""

    font: str = DEFAULT_CAPTION_FONT
    font_px: int = DEFAULT_CAPTION_FONT_PX
    text_color: _RGB = COLOR_BLACK
    background: _RGB = COLOR_WHITE
    gap_px: int = CAPTION_GAP_PX


def fit_within_tile(size: tuple[int, int], tile: int) -> tuple[int, int]:
    """
    Return the largest size with the same aspect that fits tile x tile.

    Landscape images take the full tile width, everything else the full
    tile height. The short side is truncated like an integer division
    and never drops below one pixel.
    """
    w, h = size
    if w <= 0 or h <= 0:
        msg = f"Image has invalid size {w}x{h}"
        raise ValueError(msg)
    if w / h > 1.0:
        return tile, max(1, int(tile * h / w))
    return max(1, int(tile * w / h)), tile


def center_offset(size: tuple[int, int], tile: int) -> tuple[int, int]:
    """Offset that centers an image of ``size`` inside a square tile."""
    w, h = size
    return (tile - w) // 2, (tile - h) // 2


def resize_to_tile(img: Image.Image, tile: int) -> Image.Image:
    """Resize keeping aspect so the result fits inside the tile."""
    return img.resize(fit_within_tile(img.size, tile),
                      Image.Resampling.LANCZOS)


def make_canvas(size: tuple[int, int], color: _RGB) -> Image.Image:
    """Build an opaque RGBA canvas filled with a solid color."""
    return Image.new(COLOR_MODE_RGBA, size, (*color, 255))


def paste_centered(
    canvas: Image.Image,
    img: Image.Image,
    cell_xy: tuple[int, int],
    tile: int,
) -> tuple[int, int]:
    """
    Alpha-composite ``img`` centered in the tile at ``cell_xy``.

    Returns the top-left corner the image was placed at.
    """
    dx, dy = center_offset(img.size, tile)
    dest = (cell_xy[0] + dx, cell_xy[1] + dy)
    if img.mode != COLOR_MODE_RGBA:
        img = img.convert(COLOR_MODE_RGBA)
    canvas.alpha_composite(img, dest=dest)
    return dest


@lru_cache(maxsize=8)
def _get_font(
    name: str,
    px: int,
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a font at the given pixel size with fallback; cached."""
    try:
        return ImageFont.truetype(name, px)
    except OSError:
        logger.warning(
            "Font %s unavailable, using Pillow fixed-width bitmap font", name,
        )
        return ImageFont.load_default_imagefont()


def caption_font(
    style: CaptionStyle,
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Return the (cached) font described by ``style``."""
    return _get_font(style.font, style.font_px)


def draw_caption(
    canvas: Image.Image,
    origin: tuple[int, int],
    text: str,
    style: CaptionStyle,
) -> None:
    """
    Draw ``text`` left-aligned with its top edge at ``origin``.

    Pillow's default ``la`` anchor puts the baseline one ascent below
    the given y coordinate.
    """
    draw = ImageDraw.Draw(canvas)
    draw.text(origin, text, font=caption_font(style),
              fill=(*style.text_color, 255))
