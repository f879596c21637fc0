"""Output format selection and persistence for finished collages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from image_summarizer.constants import (
    JPEG_EXTENSIONS,
    JPEG_QUALITY,
    PNG_EXTENSIONS,
)
from image_summarizer.errors import OutputWriteError, UnsupportedFormatError
from image_summarizer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

OutputFormat = Literal["PNG", "JPEG"]


def resolve_output_format(out_path: str | Path) -> OutputFormat:
    """Map the output suffix to a Pillow format name."""
    suffix = Path(out_path).suffix.lower()
    if suffix in PNG_EXTENSIONS:
        return "PNG"
    if suffix in JPEG_EXTENSIONS:
        return "JPEG"
    msg = (f"Unsupported output format '{suffix or '(none)'}' for "
           f"{out_path}: use .png, .jpg or .jpeg")
    raise UnsupportedFormatError(msg)


def save_collage(image: Image.Image, out_path: str | Path) -> Path:
    """
    Encode ``image`` according to the suffix of ``out_path`` and write it.

    The format is resolved before anything touches the filesystem, so an
    unsupported suffix never leaves a file behind. A write that fails
    part way removes the incomplete file.
    """
    path = Path(out_path)
    fmt = resolve_output_format(path)

    save_kwargs: dict[str, int] = {}
    if fmt == "JPEG":
        save_kwargs["quality"] = JPEG_QUALITY

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = path.open("wb")
    except OSError as exc:
        msg = f"Failed to create output file '{path}': {exc}"
        raise OutputWriteError(msg) from exc

    try:
        with fh:
            image.save(fh, format=fmt, **save_kwargs)
    except OSError as exc:
        path.unlink(missing_ok=True)
        msg = f"Failed to save image '{path}': {exc}"
        raise OutputWriteError(msg) from exc

    logger.info("Wrote %s collage (%dx%d) to %s", fmt, *image.size, path)
    return path
