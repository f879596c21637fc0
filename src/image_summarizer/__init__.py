"""Public package exports for the image summarizer."""

from __future__ import annotations

from .collage import CaptionStyle, CollageLayout, compose_collage, save_collage
from .config import CollageConfig
from .pipeline import build_collage

__all__ = [
    "CaptionStyle",
    "CollageConfig",
    "CollageLayout",
    "build_collage",
    "compose_collage",
    "save_collage",
]
