"""Installed package version lookup for ``--version``."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from image_summarizer.logging_utils import logger

DISTRIBUTION_NAME = "image-summarizer"
UNKNOWN_VERSION = "0.0.0"


def resolve_project_version(dist_name: str = DISTRIBUTION_NAME) -> str:
    """Return the installed distribution version, or a placeholder."""
    try:
        return importlib_metadata.version(dist_name)
    except importlib_metadata.PackageNotFoundError:
        logger.debug("Distribution %s not installed", dist_name)
        return UNKNOWN_VERSION
