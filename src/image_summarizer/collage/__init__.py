"""
Collage rendering split into core primitives, grid layout, and encoding.

The most commonly used entry points are re-exported here.
"""

from __future__ import annotations

from . import core, encoding, layouts
from .core import (
    CaptionStyle,
    center_offset,
    draw_caption,
    fit_within_tile,
    resize_to_tile,
)
from .encoding import resolve_output_format, save_collage
from .layouts import CollageLayout, compose_collage

__all__ = [
    "CaptionStyle",
    "CollageLayout",
    "center_offset",
    "compose_collage",
    "core",
    "draw_caption",
    "encoding",
    "fit_within_tile",
    "layouts",
    "resize_to_tile",
    "resolve_output_format",
    "save_collage",
]
