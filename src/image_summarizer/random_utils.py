"""
Random source used to sample images.

The pipeline never touches the global ``np.random`` state. It asks this
module for a ``Generator``: a freshly seeded one when the user passed
``--seed``, otherwise a process-wide generator seeded from OS entropy,
so unseeded runs pick a different selection each time.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    "current_numpy_seed",
    "get_numpy_rng",
    "resolve_rng",
    "seed_numpy_rng",
]


@dataclass(slots=True)
class _NumpyRngState:
    """State container for the cached Generator."""

    seed: int | None = None
    generator: np.random.Generator | None = None


_STATE = _NumpyRngState()


def seed_numpy_rng(seed: int) -> np.random.Generator:
    """Replace the shared generator with one seeded from ``seed``."""
    _STATE.seed = seed
    _STATE.generator = np.random.default_rng(seed)
    return _STATE.generator


def get_numpy_rng() -> np.random.Generator:
    """Return the shared generator, creating an entropy-seeded one."""
    if _STATE.generator is None:
        _STATE.generator = np.random.default_rng()
    return _STATE.generator


def resolve_rng(seed: int | None = None) -> np.random.Generator:
    """Seed the shared generator when ``seed`` is given, then return it."""
    if seed is None:
        return get_numpy_rng()
    return seed_numpy_rng(seed)


def current_numpy_seed() -> int | None:
    """Seed of the shared generator, or None if it came from entropy."""
    return _STATE.seed
