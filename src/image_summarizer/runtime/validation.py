"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path

from image_summarizer.errors import ConfigurationError, DiscoveryError


def validate_input_dir(input_dir: str | None) -> Path:
    """Ensure an input directory was given and points to a directory."""
    if not input_dir:
        msg = "Please specify a directory with -dir"
        raise ConfigurationError(msg)
    path = Path(input_dir)
    if not path.is_dir():
        msg = f"Input directory not found: {input_dir}"
        raise DiscoveryError(msg)
    return path


def validate_layout_parameters(grid_size: int, tile_size: int) -> None:
    """Reject grid and tile sizes that would give degenerate geometry."""
    if grid_size <= 0:
        msg = f"Grid size (-n) must be a positive integer, got {grid_size}"
        raise ConfigurationError(msg)
    if tile_size <= 0:
        msg = f"Tile size (-tile) must be a positive integer, got {tile_size}"
        raise ConfigurationError(msg)
