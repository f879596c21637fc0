"""
Constants used internally by the image summarizer.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Recognized input extensions, compared case-insensitively
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp")

# Fixed collage geometry
MARGIN_PX = 10
CAPTION_HEIGHT_PX = 20
CAPTION_GAP_PX = 5

# Output encoding
JPEG_QUALITY = 90
PNG_EXTENSIONS = (".png",)
JPEG_EXTENSIONS = (".jpg", ".jpeg")

# Internal color constants
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
