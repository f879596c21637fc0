"""Image loading for the collage pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from image_summarizer.constants import COLOR_MODE_RGBA
from image_summarizer.errors import ImageLoadError
from image_summarizer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


@dataclass(slots=True)
class LoadedImage:
    """A decoded image paired with the name shown under its tile."""

    image: Image.Image
    name: str

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) of the decoded image."""
        return self.image.size


def load_image(path: str | Path) -> LoadedImage:
    """
    Load an image from a file path and convert to RGBA.

    The file handle is released before returning, whether decoding
    succeeds or not. Alpha is kept so the composer can blend
    transparent images over the canvas background.

    Args:
        path: Path to the image file

    Returns:
        LoadedImage carrying the decoded pixels and the file's base name

    Raises:
        ImageLoadError: If the file cannot be opened or decoded

    """
    file_path = Path(path)
    try:
        with Image.open(file_path) as img:
            img.load()
            decoded = img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{file_path}'"
        raise ImageLoadError(msg) from e
    except (OSError, Image.DecompressionBombError) as e:
        msg = f"Failed to load image '{file_path}': {e!s}"
        raise ImageLoadError(msg) from e
    return LoadedImage(image=decoded, name=file_path.name)


def load_images(paths: Iterable[str | Path]) -> list[LoadedImage]:
    """Load every path in order; the first failure aborts the batch."""
    loaded = []
    for path in paths:
        item = load_image(path)
        logger.debug("Loaded %s (%dx%d)", path, *item.size)
        loaded.append(item)
    return loaded
