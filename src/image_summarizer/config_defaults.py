"""Shared default values for user-facing configuration settings."""

# Output
DEFAULT_OUTPUT = "output.png"

# Layout
DEFAULT_GRID_SIZE = 3
DEFAULT_TILE_SIZE = 300

# Captions
DEFAULT_CAPTION_FONT = "DejaVuSansMono.ttf"
DEFAULT_CAPTION_FONT_PX = 13

# Sampling (None draws a fresh seed from OS entropy)
DEFAULT_SEED: int | None = None
