"""Uniform random selection of images without replacement."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_summarizer import random_utils as is_random
from image_summarizer.errors import ConfigurationError, NotEnoughImagesError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path

    import numpy as np


def select_random(
    files: Sequence[Path],
    count: int,
    rng: np.random.Generator | None = None,
) -> list[Path]:
    """
    Pick ``count`` distinct entries from ``files`` uniformly at random.

    A full permutation of the indices is drawn and its first ``count``
    entries are kept, so every subset is equally likely. The result is
    in draw order; callers sort it when they need a stable layout.
    """
    if count <= 0:
        msg = f"Sample size must be positive, got {count}"
        raise ConfigurationError(msg)
    if len(files) < count:
        raise NotEnoughImagesError(needed=count, found=len(files))

    generator = rng or is_random.get_numpy_rng()
    order = generator.permutation(len(files))
    return [files[int(i)] for i in order[:count]]
