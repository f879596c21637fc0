"""
Error taxonomy for the collage pipeline.

Every stage raises one of these and lets it propagate; only the CLI
entry point catches them, logs the message, and turns ``exit_code`` into
the process exit status. Each class also derives from the builtin
exception that best describes it so callers can catch ``OSError`` or
``ValueError`` without importing this module.
"""

from __future__ import annotations


class CollageError(Exception):
    """Base class for all fatal pipeline errors."""

    exit_code: int = 1


class ConfigurationError(CollageError, ValueError):
    """Missing or out-of-range settings (grid size, tile size, paths)."""

    exit_code = 2


class DiscoveryError(CollageError, OSError):
    """The input directory could not be traversed."""

    exit_code = 3


class NotEnoughImagesError(CollageError):
    """Fewer candidate images were found than the grid needs."""

    exit_code = 4

    def __init__(self, needed: int, found: int) -> None:
        self.needed = needed
        self.found = found
        super().__init__(
            "Not enough images in the directory: "
            f"need at least {needed}, got {found}",
        )


class ImageLoadError(CollageError, OSError):
    """A selected file could not be opened or decoded."""

    exit_code = 5


class UnsupportedFormatError(CollageError, ValueError):
    """The output extension does not map to a known encoder."""

    exit_code = 6


class OutputWriteError(CollageError, OSError):
    """The collage could not be written to disk."""

    exit_code = 7


__all__ = [
    "CollageError",
    "ConfigurationError",
    "DiscoveryError",
    "ImageLoadError",
    "NotEnoughImagesError",
    "OutputWriteError",
    "UnsupportedFormatError",
]
