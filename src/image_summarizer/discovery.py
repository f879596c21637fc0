"""Recursive discovery of supported image files."""

from __future__ import annotations

import os
from pathlib import Path

from image_summarizer.constants import SUPPORTED_EXTENSIONS
from image_summarizer.errors import DiscoveryError
from image_summarizer.logging_utils import logger


def is_image_file(path: str | Path) -> bool:
    """Return True when the suffix is a supported image extension."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


def _raise_walk_error(exc: OSError) -> None:
    msg = f"Failed to scan '{exc.filename}': {exc.strerror or exc}"
    raise DiscoveryError(msg) from exc


def find_image_files(root: str | Path) -> list[Path]:
    """
    Walk ``root`` recursively and collect every supported image file.

    Directories and files are visited in sorted name order so repeated
    scans of the same tree return the same list. Any error raised while
    listing a directory aborts the whole scan.

    Raises:
        DiscoveryError: If ``root`` is missing, not a directory, or a
            directory inside it cannot be read.

    """
    root_path = Path(root)
    if not root_path.is_dir():
        msg = f"Input directory not found: {root_path}"
        raise DiscoveryError(msg)

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(
        root_path, onerror=_raise_walk_error,
    ):
        dirnames.sort()
        found.extend(
            Path(dirpath) / name
            for name in sorted(filenames)
            if is_image_file(name)
        )

    logger.info("Found %d image file(s) under %s", len(found), root_path)
    return found
