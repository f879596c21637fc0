"""
Configuration schema and loader for the image summarizer.

Defines Pydantic models representing structured configuration sections,
a TOML-based config loader, and the merge of command-line overrides on
top of a loaded (or default) configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field, ValidationError
from tomlkit.exceptions import TOMLKitError

from image_summarizer.collage import CaptionStyle, CollageLayout
from image_summarizer.config_defaults import (
    DEFAULT_CAPTION_FONT,
    DEFAULT_CAPTION_FONT_PX,
    DEFAULT_GRID_SIZE,
    DEFAULT_OUTPUT,
    DEFAULT_SEED,
    DEFAULT_TILE_SIZE,
)
from image_summarizer.errors import ConfigurationError


class InputConfig(BaseModel):
    """Directory scanned for candidate images."""

    dir: str | None = None


class OutputConfig(BaseModel):
    """Destination file; its extension selects the encoder."""

    out: str = Field(DEFAULT_OUTPUT, min_length=1)


class LayoutConfig(BaseModel):
    """Grid dimension and tile size."""

    grid_size: int = Field(DEFAULT_GRID_SIZE, ge=1)
    tile_size: int = Field(DEFAULT_TILE_SIZE, ge=1)


class CaptionConfig(BaseModel):
    """Font used for the filename captions."""

    font: str = Field(DEFAULT_CAPTION_FONT)
    font_px: int = Field(DEFAULT_CAPTION_FONT_PX, ge=1)


class SamplingConfig(BaseModel):
    """Random selection settings."""

    seed: int | None = Field(DEFAULT_SEED, ge=0)


class CollageConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    caption: CaptionConfig = Field(
        default_factory=lambda: CaptionConfig.model_validate({}),
    )
    sampling: SamplingConfig = Field(
        default_factory=lambda: SamplingConfig.model_validate({}),
    )

    def collage_layout(self) -> CollageLayout:
        """Build the grid geometry described by this config."""
        return CollageLayout(
            grid_size=self.layout.grid_size,
            tile=self.layout.tile_size,
        )

    def caption_style(self) -> CaptionStyle:
        """Build the caption appearance described by this config."""
        return CaptionStyle(
            font=self.caption.font,
            font_px=self.caption.font_px,
        )


# CLI destination -> (config section, field)
CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "dir": ("input", "dir"),
    "out": ("output", "out"),
    "n": ("layout", "grid_size"),
    "tile": ("layout", "tile_size"),
    "font": ("caption", "font"),
    "font_size": ("caption", "font_px"),
    "seed": ("sampling", "seed"),
}


def _validate(data: dict[str, Any], source: str) -> CollageConfig:
    try:
        return CollageConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration ({source}): {e}"
        raise ConfigurationError(msg) from e


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> CollageConfig:
        """
        Load a collage configuration from a TOML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file is not valid TOML or its
                contents fail validation.

        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        try:
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        except (TOMLKitError, UnicodeDecodeError) as e:
            msg = f"Malformed config file {path}: {e}"
            raise ConfigurationError(msg) from e

        return _validate(doc.unwrap(), str(config_path))


def build_config_from_cli(
    args: dict[str, Any],
    base_config: CollageConfig | None = None,
) -> CollageConfig:
    """
    Overlay explicit command-line values on a base configuration.

    Keys missing from ``args`` or set to None leave the base value
    untouched, so values from a config file survive unless the user
    repeats them on the command line.
    """
    base = base_config or CollageConfig()
    data = base.model_dump()
    for key, (section, field) in CLI_FIELD_MAP.items():
        value = args.get(key)
        if value is not None:
            data[section][field] = value
    return _validate(data, "command line")
